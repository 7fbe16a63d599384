"""
Selection order resolution — pure functions, no state, no logging.

A selector's effective order comes from its own configuration when set,
otherwise from its parent.  Callers walk the selector tree root-to-leaf so
the inherited value they pass in is always already resolved; the root gets
``DEFAULT_ROOT_SELECTION_ORDER`` (RANDOM).

Example:
    >>> from selection_order.core.models import SelectionOrder
    >>> resolve_selection_order(None, SelectionOrder.RANDOM)
    <SelectionOrder.RANDOM: 'RANDOM'>
    >>> resolve_selection_order(SelectionOrder.SORTED, SelectionOrder.RANDOM)
    <SelectionOrder.SORTED: 'SORTED'>
"""

from typing import Optional

from selection_order.core.errors import (
    IncompatibleCacheTypeError,
    InvalidArgumentError,
)
from selection_order.core.models import SelectionCacheType, SelectionOrder


def resolve_selection_order(
    selection_order: Optional[SelectionOrder],
    inherited_selection_order: SelectionOrder,
) -> SelectionOrder:
    """
    Compute the effective selection order of one selector.

    Args:
        selection_order:           The order configured on the selector.
                                   None and INHERIT both mean "unset".
        inherited_selection_order: The parent's resolved order, or the root
                                   default.  Never None, never INHERIT.

    Returns:
        The configured order if set, else the inherited one.  Never INHERIT.

    Raises:
        InvalidArgumentError: inherited_selection_order is None or INHERIT.
    """
    if inherited_selection_order is None:
        raise InvalidArgumentError(
            f"The inherited_selection_order ({inherited_selection_order}) "
            f"cannot be None."
        )
    if inherited_selection_order is SelectionOrder.INHERIT:
        raise InvalidArgumentError(
            f"The inherited_selection_order ({inherited_selection_order.value}) "
            f"must already be resolved."
        )
    if selection_order is None or selection_order is SelectionOrder.INHERIT:
        return inherited_selection_order
    return selection_order


def resolve_cache_type(
    cache_type: Optional[SelectionCacheType],
    minimum_cache_type: SelectionCacheType = SelectionCacheType.JUST_IN_TIME,
) -> SelectionCacheType:
    """
    Compute the effective cache type of one selector.

    An unset cache type takes ``minimum_cache_type`` (the parent's scope).
    A cached selector never caches for less than the minimum: STEP under a
    PHASE-cached parent becomes PHASE.  JUST_IN_TIME is left as configured.
    """
    if minimum_cache_type is None:
        raise InvalidArgumentError(
            f"The minimum_cache_type ({minimum_cache_type}) cannot be None."
        )
    if cache_type is None:
        return minimum_cache_type
    if cache_type.is_cached and cache_type < minimum_cache_type:
        return minimum_cache_type
    return cache_type


def validate_cache_compatibility(
    selection_order: SelectionOrder,
    cache_type: SelectionCacheType,
    selector_name: Optional[str] = None,
) -> None:
    """
    Check a resolved order against a resolved cache type.

    SORTED, SHUFFLED and PROBABILISTIC need the selector's elements to be
    materialized, so they are only legal with cache type STEP or higher.

    Raises:
        InvalidArgumentError:       selection_order is still INHERIT.
        IncompatibleCacheTypeError: the order needs a cache the selector
                                    does not have.
    """
    if not selection_order.is_resolved:
        raise InvalidArgumentError(
            f"The selection_order ({selection_order.value}) must be resolved "
            f"before validating it against a cache type."
        )
    if selection_order.requires_caching and cache_type < SelectionCacheType.STEP:
        raise IncompatibleCacheTypeError(
            selection_order, cache_type, selector_name=selector_name
        )
