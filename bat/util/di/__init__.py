from bat.util.di.base import Provider
from bat.util.di.scope import Scope

__all__ = ["Provider", "Scope"]
