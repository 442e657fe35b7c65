"""Error hierarchy for warden_oauth2.

Error layers:
- WardenError: Base class for all warden_oauth2 errors
- DomainError: Programmer or caller mistakes detected while wiring strategies
- InfrastructureError: System-level failures like a broken settings source

Duplicate registrations are not errors: the registries report them by
returning False.
"""


class WardenError(Exception):
    """Base class for all warden_oauth2 errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(WardenError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """No strategy registered under the requested name."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


class UnresolvableIdentifierError(ValidationError):
    """A provider keyword cannot be turned into a strategy name."""

    def __init__(self, keyword: object) -> None:
        super().__init__(
            f"Cannot derive a strategy name from provider keyword {keyword!r}",
            field="keyword",
        )
        self.code = "UNRESOLVABLE_IDENTIFIER"
        self.keyword = keyword


class ConflictError(DomainError):
    """A name is already taken by something else."""


class KeywordCollisionError(ConflictError):
    """Two provider keywords normalize to the same strategy name."""

    def __init__(self, keyword: str, name: str, existing_keyword: str) -> None:
        super().__init__(
            f"Provider keyword {keyword!r} maps to strategy {name}, "
            f"which is already built for {existing_keyword!r}",
            code="KEYWORD_COLLISION",
        )
        self.keyword = keyword
        self.name = name
        self.existing_keyword = existing_keyword


class InvalidStateError(DomainError):
    """Operation not allowed in the current state."""


class MissingResolverError(InvalidStateError):
    """A strategy was asked to resolve a user but has no resolver bound."""

    def __init__(self, strategy_name: str) -> None:
        super().__init__(
            f"Strategy {strategy_name} has no access token user resolver configured",
            code="MISSING_RESOLVER",
        )
        self.strategy_name = strategy_name


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(WardenError):
    """Base class for infrastructure/system errors."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
