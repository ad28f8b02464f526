"""Single-value wrappers for user-supplied strings."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Frozen wrapper around one validated primitive.

    Subclasses validate in ``field_validator("root")``. Dumping yields the
    bare primitive, so rows and responses store ``"naruto_fan"`` rather
    than ``{"root": "naruto_fan"}``.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
