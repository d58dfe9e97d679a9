from dishka import provide

from bat.config import Config
from bat.domain.stemcell.port.extractor import ArchiveExtractor
from bat.infrastructure.archive.tar import TarArchiveExtractor
from bat.util.di.base import Provider
from bat.util.di.scope import Scope


class ArchiveProvider(Provider):
    @provide(scope=Scope.APP)
    def get_extractor(self, config: Config) -> ArchiveExtractor:
        return TarArchiveExtractor(
            tar_binary=config.archive.tar_binary,
            timeout=config.archive.timeout_seconds,
        )
