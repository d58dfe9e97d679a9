from bat.domain.stemcell.model.value import (
    LATEST_VERSION,
    STEMCELL_MANIFEST_ENTRY,
    Stemcell,
)

__all__ = [
    "LATEST_VERSION",
    "STEMCELL_MANIFEST_ENTRY",
    "Stemcell",
]
