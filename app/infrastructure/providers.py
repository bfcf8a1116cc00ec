"""Value-or-accessor providers.

Settings such as the default view template or the preferred language are
either a fixed value or computed per request. A provider wraps both cases
so callers resolve them through a single ``evaluate`` call.

Example:
    template = Static("default.html")
    language = Computed(lambda request: request.app.state.preferred_language)

    await evaluate(template, request)
"""

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar, Union

from infrastructure.exceptions import ConfigurationError

T = TypeVar("T")


@dataclass(frozen=True)
class Static(Generic[T]):
    """Provider of a fixed value."""

    value: T


@dataclass(frozen=True)
class Computed(Generic[T]):
    """Provider of a value computed from the current request.

    The accessor may be a plain function or a coroutine function.
    """

    accessor: Callable[[Any], Union[T, Awaitable[T]]]


Provider = Union[Static[T], Computed[T]]


async def maybe_await(value: Any) -> Any:
    """Await a value if it is awaitable, return it unchanged otherwise."""
    if inspect.isawaitable(value):
        return await value
    return value


async def evaluate(provider: Provider, request: Any) -> Any:
    """Resolve a provider for a request.

    Args:
        provider: Static or Computed provider.
        request: The current request, passed to computed accessors.

    Returns:
        The provided value (not validated).
    """
    if isinstance(provider, Computed):
        return await maybe_await(provider.accessor(request))
    return provider.value


def as_provider(value: Any, kind: type = str, name: str = "value") -> Provider:
    """Coerce a value, a callable or a provider into a provider.

    Args:
        value: Existing provider, callable accessor, or static value.
        kind: Expected type of a static value.
        name: Setting name used in error messages.

    Returns:
        Static or Computed provider.

    Raises:
        ConfigurationError: If value is neither a provider, a callable,
            nor an instance of kind.
    """
    if isinstance(value, (Static, Computed)):
        return value
    if callable(value):
        return Computed(value)
    if isinstance(value, kind):
        return Static(value)
    raise ConfigurationError(f"Malformed reference to {name}: {value!r}")
