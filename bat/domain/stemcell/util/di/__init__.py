from bat.domain.stemcell.util.di.provider import StemcellProvider

__all__ = ["StemcellProvider"]
