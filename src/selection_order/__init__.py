"""selection_order — effective selection order of heuristic search selectors.

Public API:
    from selection_order import SelectionOrder, SelectionCacheType
    from selection_order import resolve_selection_order, resolve_cache_type
    from selection_order import SelectorConfig, ResolverSettings
    from selection_order import SelectorTreeResolver, ResolvedSelector
"""

import logging

from .config import ResolverSettings, SelectorConfig
from .core import (
    DEFAULT_ROOT_SELECTION_ORDER,
    IncompatibleCacheTypeError,
    InvalidArgumentError,
    SelectionCacheType,
    SelectionOrder,
    SelectionOrderError,
    SelectorConfigError,
    resolve_cache_type,
    resolve_selection_order,
    validate_cache_compatibility,
)
from .logging_setup import setup_logging
from .tree import ResolvedSelector, SelectorTreeResolver, resolve_tree

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Models
    "DEFAULT_ROOT_SELECTION_ORDER",
    "SelectionCacheType",
    "SelectionOrder",
    # Resolution
    "resolve_cache_type",
    "resolve_selection_order",
    "validate_cache_compatibility",
    # Configuration
    "ResolverSettings",
    "SelectorConfig",
    # Tree
    "ResolvedSelector",
    "SelectorTreeResolver",
    "resolve_tree",
    # Errors
    "IncompatibleCacheTypeError",
    "InvalidArgumentError",
    "SelectionOrderError",
    "SelectorConfigError",
    # Logging
    "setup_logging",
]
