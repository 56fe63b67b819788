from __future__ import annotations

import pytest

from petstore.core.exceptions import DelegateConfigurationError
from petstore.delegates import DefaultStoreApiDelegate, StoreApiDelegate, load_delegate
from petstore.delegates import default as default_module


def test_load_delegate_instantiates_class() -> None:
    delegate = load_delegate("petstore.delegates.default:DefaultStoreApiDelegate")
    assert isinstance(delegate, DefaultStoreApiDelegate)
    assert isinstance(delegate, StoreApiDelegate)


def test_load_delegate_uses_instance_as_is(monkeypatch: pytest.MonkeyPatch) -> None:
    shared = DefaultStoreApiDelegate()
    monkeypatch.setattr(default_module, "shared_delegate", shared, raising=False)

    assert load_delegate("petstore.delegates.default:shared_delegate") is shared


@pytest.mark.parametrize(
    "path",
    [
        "petstore.delegates.default",
        ":DefaultStoreApiDelegate",
        "petstore.delegates.default:",
        "petstore.does_not_exist:Delegate",
        "petstore.delegates.default:Missing",
        "petstore.schemas:Order",
    ],
)
def test_load_delegate_rejects_bad_paths(path: str) -> None:
    with pytest.raises(DelegateConfigurationError):
        load_delegate(path)
