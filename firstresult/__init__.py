"""firstresult Package.

Small, generic helpers for taking the first value out of a collection and falling back
to a lazily computed default when there is none.

-   **Plain Functions**: `first_or_default(collection, fallback)` returns the first element
    or the fallback's value, `first(collection)` reports presence with a
    `tramp.optionals.Optional`.
-   **Deferred Suppliers**: `FirstResultOrDefault` binds a collection and a fallback into
    a reusable zero-argument callable that can itself be used as a fallback.
-   **Async Support**: `first_or_default_async`, `first_async` and
    `AsyncFirstResultOrDefault` accept async iterables like
    `tramp.async_batch_iterator.AsyncBatchIterator` and await async fallbacks.

Fallbacks are only ever invoked when the collection is empty, at most once per
evaluation, and anything they raise reaches the caller unchanged.

Note:
This `__init__.py` file uses a custom `__getattr__` to lazily load the public symbols
from their submodules.
"""
import importlib
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from firstresult.defaults import AsyncSupplier, Supplier, first, first_async, first_or_default, first_or_default_async
    from firstresult.suppliers import AsyncFirstResultOrDefault, FirstResultOrDefault

__lookup = {
    "first": "firstresult.defaults",
    "first_async": "firstresult.defaults",
    "first_or_default": "firstresult.defaults",
    "first_or_default_async": "firstresult.defaults",
    "FirstResultOrDefault": "firstresult.suppliers",
    "AsyncFirstResultOrDefault": "firstresult.suppliers",
    "Supplier": "firstresult.defaults",
    "AsyncSupplier": "firstresult.defaults",
}

__all__ = list(__lookup.keys())

__modules = {
    _path.stem
    for _path in Path(__file__).parent.iterdir()
    if not _path.name.startswith("_") and _path.suffix == ".py"
}


def __getattr__(name):
    """Lazily loads the public symbols and submodules of the package.

    Args:
        name (str): The name of the attribute being accessed.

    Returns:
        The requested symbol or submodule.

    Raises:
        ImportError: If a symbol listed in `__lookup` cannot be imported from its module.
        AttributeError: If the name is neither a known symbol nor a submodule.
    """
    if name in __lookup:
        try:
            module = importlib.import_module(__lookup[name])
        except Exception as e:
            raise ImportError(f"Failed to import {name} from {__lookup[name]}: {e}") from e

        return getattr(module, name)

    if name in __modules:
        return importlib.import_module(f"firstresult.{name}")

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
