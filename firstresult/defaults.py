"""Functions for taking the first value from a collection, or falling back to a default.

Every function in this module pulls at most one element from the collection it is given
and never inspects truthiness or length, so falsy values like `0`, `""` or `None` are
valid first results. Fallbacks are evaluated lazily: they are only invoked when the
collection turns out to be empty, and they are invoked exactly once.

Key Components:

-   `first_or_default`: Returns the first element or the result of a fallback callable.
-   `first`: Returns the first element wrapped in `Optional.Some`, or `Optional.Nothing`.
-   `first_or_default_async` / `first_async`: The same operations for async iterables,
    such as `tramp.async_batch_iterator.AsyncBatchIterator`. Async fallbacks are awaited.

Example:
    ```python
    from firstresult import first, first_or_default
    from tramp.optionals import Optional

    first_or_default([3, 1, 2], lambda: -1)  # 3
    first_or_default([], lambda: -1)  # -1

    match first(users):
        case Optional.Some(user):
            print(f"First user: {user.name}")
        case Optional.Nothing():
            print("No users")
    ```
"""
from inspect import isawaitable
from typing import AsyncIterable, Awaitable, Callable, Iterable

from tramp.optionals import Optional


type Supplier[T] = Callable[[], T]
type AsyncSupplier[T] = Callable[[], T | Awaitable[T]]

_EMPTY = object()


def first_or_default[T](collection: Iterable[T], fallback: Supplier[T]) -> T:
    """Returns the first element of the collection, or the fallback's result if it is empty.

    Only the first element is pulled from the collection. When a one-shot iterator is
    passed exactly one item is consumed, re-iterable containers are left untouched.

    Args:
        collection: The values to take the first element from.
        fallback: A zero-argument callable invoked once, only when the collection is empty.

    Returns:
        The first element, or the value produced by `fallback`.

    Raises:
        Exception: Anything raised by iterating the collection or by `fallback` is
            propagated unchanged.
    """
    value = next(iter(collection), _EMPTY)
    if value is _EMPTY:
        return fallback()

    return value


def first[T](collection: Iterable[T]) -> Optional[T]:
    """Returns the first element of the collection as an `Optional`.

    Args:
        collection: The values to take the first element from.

    Returns:
        `Optional.Some(element)` if the collection yields anything, otherwise
        `Optional.Nothing()`.
    """
    value = next(iter(collection), _EMPTY)
    return Optional.Nothing() if value is _EMPTY else Optional.Some(value)


async def first_or_default_async[T](collection: AsyncIterable[T], fallback: AsyncSupplier[T]) -> T:
    """Async counterpart of `first_or_default`.

    The fallback may be a plain callable or an async one, if calling it returns an
    awaitable that awaitable is awaited and its result returned.

    Args:
        collection: An async iterable, e.g. an `AsyncBatchIterator`.
        fallback: A zero-argument callable invoked once, only when the collection is empty.

    Returns:
        The first element, or the (awaited) value produced by `fallback`.
    """
    match await first_async(collection):
        case Optional.Some(value):
            return value

        case _:
            return await supply_async(fallback)


async def first_async[T](collection: AsyncIterable[T]) -> Optional[T]:
    """Async counterpart of `first`, awaits at most one item from the collection."""
    async for value in collection:
        return Optional.Some(value)

    return Optional.Nothing()


async def supply_async[T](supplier: AsyncSupplier[T]) -> T:
    """Invokes the supplier once, awaiting its return value when it is awaitable."""
    result = supplier()
    return await result if isawaitable(result) else result
