from bat.domain.stemcell.port.extractor import ArchiveExtractor

__all__ = ["ArchiveExtractor"]
