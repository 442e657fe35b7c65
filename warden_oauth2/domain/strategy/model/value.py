"""Value objects for the strategy domain."""

import copy
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from pydantic import Field, field_validator

from warden_oauth2.domain.shared.model.value import ValueObject

UserResolver = Callable[[str], Any | None]
"""Maps an access token to an application user, or None when no user matches.

Resolvers must return None for valid but unknown tokens and only raise for
exceptional conditions.
"""


class OAuth2Config(ValueObject):
    """Credentials and options of one OAuth2 service.

    Bound to a strategy descriptor at most once. The model is frozen and
    ``options`` is a read-only view over a private copy, so a bound payload
    can be neither reassigned nor changed in place.
    """

    consumer_key: str
    consumer_secret: str = Field(repr=False)
    options: Mapping[str, Any] = Field(default_factory=dict)

    @field_validator("options", mode="after")
    @classmethod
    def freeze_options(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(copy.deepcopy(dict(v)))
