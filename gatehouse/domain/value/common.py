"""Base classes for value objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel


class ValueObject(BaseModel):
    """Base class for structured value objects.

    Immutable, compared by value, and closed: unknown fields are rejected
    rather than silently carried along.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
    )


T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Value object wrapping a single primitive (accessed via ``.root``).

    ``model_dump()`` returns the primitive itself, so tokens and slugs
    serialize as plain strings.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """Return string representation of the root value."""
        return str(self.root)
