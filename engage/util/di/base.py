"""Provider metadata shared by every dishka provider in the service."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure the test container can swap for an in-memory double
Component = Literal["catalog", "persistence"]


class ProviderBase(Provider):
    """dishka provider tagged with swap metadata.

    A provider class that has subclasses is a *component*: its subclasses are
    the interchangeable implementations, told apart by ``__is_mock__``.
    A provider class without subclasses is used as-is.
    """

    # Set on component bases only
    __mock_component__: ClassVar[Component | None] = None
    # Set on component implementations
    __is_mock__: ClassVar[bool] = False
