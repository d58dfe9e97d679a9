from bat.domain.stemcell.service.resolver import StemcellResolver

__all__ = ["StemcellResolver"]
