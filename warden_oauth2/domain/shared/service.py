"""Base class for domain services."""

from dataclasses import dataclass
from typing import dataclass_transform


@dataclass_transform(eq_default=False)
class _ServiceMeta(type):
    """Turns every Service subclass into an identity-compared dataclass."""

    def __new__(mcs, name: str, bases: tuple, namespace: dict):
        cls = super().__new__(mcs, name, bases, namespace)
        if not any(isinstance(base, mcs) for base in bases):
            return cls
        return dataclass(cls, eq=False)


class Service(metaclass=_ServiceMeta):
    """Domain services declare their collaborators as annotated fields.

    Services are shared application-wide singletons, so they keep identity
    semantics instead of field-wise equality.
    """
