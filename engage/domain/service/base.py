"""Base service class for domain services."""

from typing import Any, Callable, TypeVar

from pydantic import ValidationError as PydanticValidationError

from engage.domain.error import ValidationError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    @staticmethod
    def _parse(factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Build a value object or model, raising the domain ValidationError.

        Catches pydantic's errors as well as the plain ValueError an Enum
        raises for an unknown member.
        """
        try:
            return factory(*args, **kwargs)
        except PydanticValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise ValidationError(messages) from e
        except ValueError as e:
            raise ValidationError(str(e)) from e
