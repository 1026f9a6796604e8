import sys

import pytest

import firstresult
from firstresult import defaults, suppliers


def test_lazy_symbols():
    assert firstresult.first_or_default is defaults.first_or_default
    assert firstresult.first is defaults.first
    assert firstresult.first_or_default_async is defaults.first_or_default_async
    assert firstresult.first_async is defaults.first_async
    assert firstresult.FirstResultOrDefault is suppliers.FirstResultOrDefault
    assert firstresult.AsyncFirstResultOrDefault is suppliers.AsyncFirstResultOrDefault


def test_all_symbols_resolve():
    for name in firstresult.__all__:
        assert getattr(firstresult, name) is not None


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        firstresult.does_not_exist


def test_first_or_default_examples():
    calls = []

    def fallback():
        calls.append(True)
        return -1

    assert firstresult.first_or_default([3, 1, 2], fallback) == 3
    assert calls == []

    assert firstresult.first_or_default([], fallback) == -1
    assert calls == [True]


def test_failed_lazy_import_is_chained(monkeypatch):
    monkeypatch.setitem(sys.modules, "firstresult.defaults", None)
    with pytest.raises(ImportError, match="Failed to import first_or_default from firstresult.defaults") as excinfo:
        firstresult.first_or_default

    assert excinfo.value.__cause__ is not None


def test_supplier_aliases_are_shared():
    assert firstresult.Supplier is defaults.Supplier
    assert suppliers.Supplier is defaults.Supplier
    assert firstresult.AsyncSupplier is suppliers.AsyncSupplier
