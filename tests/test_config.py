from __future__ import annotations

import pytest
from pydantic import ValidationError

from petstore.core.config import DEFAULT_STORE_DELEGATE, Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.api_base_path == "/v2"
    assert settings.store_delegate == DEFAULT_STORE_DELEGATE
    assert settings.is_production is False


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("/v2", "/v2"), ("v2", "/v2"), ("/v2/", "/v2"), ("/api/v3", "/api/v3"), ("", "")],
)
def test_base_path_is_normalized(raw: str, expected: str) -> None:
    assert Settings(_env_file=None, api_base_path=raw).api_base_path == expected


def test_production_requires_real_delegate() -> None:
    with pytest.raises(ValidationError, match="store_delegate"):
        Settings(_env_file=None, app_env="production")


def test_production_with_custom_delegate() -> None:
    settings = Settings(
        _env_file=None,
        app_env="production",
        store_delegate="myshop.store:OrderDelegate",
    )
    assert settings.is_production is True
