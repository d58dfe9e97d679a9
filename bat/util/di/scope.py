"""Custom Dishka scopes for bat."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """bat dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Process lifetime (settings, adapters)
    - UOW: One resolution or one acceptance run
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
