from typing import Annotated

from pydantic import StringConstraints

from bat.domain.shared.model.value import ValueObject

LATEST_VERSION = "latest"
"""Sentinel version: read the real name and version from the stemcell archive."""

STEMCELL_MANIFEST_ENTRY = "stemcell.MF"

NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class Stemcell(ValueObject):
    """Resolved identity of a stemcell (named, versioned machine image).

    Two stemcells are the same stemcell when their canonical ``name-version``
    forms match; where the artifact lives does not take part in equality.
    """

    name: NonEmptyStr
    version: NonEmptyStr
    path: str | None = None  # local path or URI of the artifact

    def __str__(self) -> str:
        return f"{self.name}-{self.version}"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Stemcell, str)):
            return str(self) == str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))
