"""Selection order enumerations and the pure resolution functions."""

from .errors import (
    IncompatibleCacheTypeError,
    InvalidArgumentError,
    SelectionOrderError,
    SelectorConfigError,
)
from .models import DEFAULT_ROOT_SELECTION_ORDER, SelectionCacheType, SelectionOrder
from .resolver import (
    resolve_cache_type,
    resolve_selection_order,
    validate_cache_compatibility,
)

__all__ = [
    "DEFAULT_ROOT_SELECTION_ORDER",
    "SelectionCacheType",
    "SelectionOrder",
    "resolve_cache_type",
    "resolve_selection_order",
    "validate_cache_compatibility",
    "IncompatibleCacheTypeError",
    "InvalidArgumentError",
    "SelectionOrderError",
    "SelectorConfigError",
]
