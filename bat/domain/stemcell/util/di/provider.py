from dishka import provide

from bat.domain.stemcell.service.resolver import StemcellResolver
from bat.util.di.base import Provider
from bat.util.di.scope import Scope


class StemcellProvider(Provider):
    resolver = provide(StemcellResolver, scope=Scope.UOW)
