from bat.infrastructure.archive.di import ArchiveProvider
from bat.infrastructure.archive.tar import TarArchiveExtractor

__all__ = ["ArchiveProvider", "TarArchiveExtractor"]
