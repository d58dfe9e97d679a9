from dishka import Container, from_context, make_container

from bat.config import Config
from bat.domain.stemcell.util.di import StemcellProvider
from bat.infrastructure.archive import ArchiveProvider
from bat.util.di.base import Provider
from bat.util.di.scope import Scope


class ConfigProvider(Provider):
    config = from_context(provides=Config, scope=Scope.APP)


def create_container(config: Config | None = None) -> Container:
    config = config or Config()

    return make_container(
        ConfigProvider(),
        ArchiveProvider(),
        StemcellProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
