"""Deferred suppliers that resolve to the first value of a collection or a default.

A supplier binds a collection and a fallback together without touching either. The
value is only computed when the supplier is asked for it, and it is recomputed on every
request, so changes made to the collection between requests are observed.

Because suppliers are zero-argument callables themselves, they can be used anywhere a
fallback is expected, which makes it possible to chain several collections together:

```python
from firstresult import FirstResultOrDefault

preferred = FirstResultOrDefault(user_addresses, lambda: None)
address = FirstResultOrDefault(account_addresses, preferred)

address.get()  # First account address, else first user address, else None
```

`AsyncFirstResultOrDefault` is the awaitable counterpart for async iterables.
"""
import logging
from typing import AsyncIterable, Awaitable, Iterable

from tramp.optionals import Optional

from firstresult.defaults import AsyncSupplier, Supplier, first, first_async, supply_async


logger = logging.getLogger(__name__)


class FirstResultOrDefault[T]:
    """A supplier that returns the first element of a collection, or a fallback's value.

    Attributes:
        collection (Iterable[T]): The collection the first element is taken from.
        fallback (Supplier[T]): Invoked once per request, only while the collection is empty.
    """
    def __init__(self, collection: Iterable[T], fallback: Supplier[T]):
        """
        Args:
            collection: The values to take the first element from.
            fallback: A zero-argument callable that produces the default value.
        """
        self.collection = collection
        self.fallback = fallback

    def __call__(self) -> T:
        return self.get()

    def __repr__(self):
        return f"{type(self).__name__}({self.collection!r}, {self.fallback!r})"

    def get(self) -> T:
        """Resolves the supplier against the current contents of the collection.

        Returns:
            The first element of the collection, or the value produced by the fallback.

        Raises:
            Exception: Anything raised by the fallback is propagated unchanged.
        """
        match first(self.collection):
            case Optional.Some(value):
                return value

            case _:
                logger.debug("%r found no elements, using the fallback", self)
                return self.fallback()


class AsyncFirstResultOrDefault[T]:
    """An awaitable supplier that resolves to the first item of an async iterable, or a default.

    Awaiting the supplier, awaiting `get()` and awaiting the result of calling the supplier
    are all equivalent. The fallback can be a plain or an async callable, so a
    `FirstResultOrDefault` or another `AsyncFirstResultOrDefault` can serve as the fallback.

    Attributes:
        collection (AsyncIterable[T]): The async iterable the first item is taken from.
        fallback (AsyncSupplier[T]): Invoked once per evaluation, only while the iterable is empty.
    """
    def __init__(self, collection: AsyncIterable[T], fallback: AsyncSupplier[T]):
        self.collection = collection
        self.fallback = fallback

    def __await__(self):
        return self.get().__await__()

    def __call__(self) -> Awaitable[T]:
        return self.get()

    def __repr__(self):
        return f"{type(self).__name__}({self.collection!r}, {self.fallback!r})"

    async def get(self) -> T:
        """Evaluates the supplier, awaiting at most one item and, when empty, the fallback.

        Returns:
            The first item of the iterable, or the (awaited) value produced by the fallback.
        """
        match await first_async(self.collection):
            case Optional.Some(value):
                return value

            case _:
                logger.debug("%r found no items, using the fallback", self)
                return await supply_async(self.fallback)
