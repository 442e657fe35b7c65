"""Custom Dishka scopes for warden_oauth2."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """warden_oauth2 dependency injection scopes.

    - APP: Process lifetime. Registries and services live here, constructed
      once at startup and never torn down.
    """

    APP = new_scope("APP")
