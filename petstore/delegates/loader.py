from __future__ import annotations

import importlib
import inspect
import logging

from petstore.core.exceptions import DelegateConfigurationError
from petstore.delegates.base import StoreApiDelegate

logger = logging.getLogger(__name__)


def load_delegate(path: str) -> StoreApiDelegate:
    """Resolve a ``module:attribute`` path into a delegate instance.

    Classes are instantiated without arguments; anything else is used as is.
    """
    module_name, sep, attr = path.partition(":")
    if not sep or not module_name or not attr:
        raise DelegateConfigurationError(
            f"Store delegate path {path!r} must look like 'package.module:Attribute'"
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise DelegateConfigurationError(f"Cannot import store delegate module {module_name!r}") from exc

    try:
        target = getattr(module, attr)
    except AttributeError as exc:
        raise DelegateConfigurationError(f"Module {module_name!r} has no attribute {attr!r}") from exc

    delegate = target() if inspect.isclass(target) else target
    if not isinstance(delegate, StoreApiDelegate):
        raise DelegateConfigurationError(f"{path!r} does not implement StoreApiDelegate")

    logger.info("Using store delegate %s", path)
    return delegate
