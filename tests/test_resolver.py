"""
Tests for the pure resolution functions.

Tests cover:
- Unset / INHERIT configured order takes the inherited order verbatim
- An explicit configured order always wins
- Missing or unresolved inherited order fails with InvalidArgumentError
- Result is never INHERIT; re-resolving a resolved order is idempotent
- Cache type resolution and order/cache compatibility
"""

import pytest

from conftest import RESOLVED_ORDERS
from selection_order.core.errors import (
    IncompatibleCacheTypeError,
    InvalidArgumentError,
    SelectorConfigError,
)
from selection_order.core.models import SelectionCacheType, SelectionOrder
from selection_order.core.resolver import (
    resolve_cache_type,
    resolve_selection_order,
    validate_cache_compatibility,
)


ALL_CONFIGURED = [None] + list(SelectionOrder)


# ---------------------------------------------------------------------------
# 1. Inheritance
# ---------------------------------------------------------------------------

class TestInheritance:
    @pytest.mark.parametrize("inherited", RESOLVED_ORDERS)
    def test_unset_takes_inherited(self, inherited):
        assert resolve_selection_order(None, inherited) is inherited

    @pytest.mark.parametrize("inherited", RESOLVED_ORDERS)
    def test_explicit_inherit_takes_inherited(self, inherited):
        assert resolve_selection_order(SelectionOrder.INHERIT, inherited) is inherited


# ---------------------------------------------------------------------------
# 2. Local choice wins
# ---------------------------------------------------------------------------

class TestLocalOverride:
    @pytest.mark.parametrize("inherited", RESOLVED_ORDERS)
    @pytest.mark.parametrize("configured", RESOLVED_ORDERS)
    def test_configured_wins(self, configured, inherited):
        assert resolve_selection_order(configured, inherited) is configured

    @pytest.mark.parametrize("order", RESOLVED_ORDERS)
    def test_idempotent(self, order):
        once = resolve_selection_order(order, order)
        assert resolve_selection_order(once, once) is order


# ---------------------------------------------------------------------------
# 3. Never INHERIT
# ---------------------------------------------------------------------------

class TestResultIsResolved:
    @pytest.mark.parametrize("inherited", RESOLVED_ORDERS)
    @pytest.mark.parametrize("configured", ALL_CONFIGURED)
    def test_result_never_inherit(self, configured, inherited):
        result = resolve_selection_order(configured, inherited)
        assert result is not SelectionOrder.INHERIT
        assert result.is_resolved


# ---------------------------------------------------------------------------
# 4. Contract violations
# ---------------------------------------------------------------------------

class TestMissingInherited:
    @pytest.mark.parametrize("configured", ALL_CONFIGURED)
    def test_absent_inherited_fails(self, configured):
        with pytest.raises(InvalidArgumentError, match="inherited_selection_order"):
            resolve_selection_order(configured, None)

    @pytest.mark.parametrize("configured", ALL_CONFIGURED)
    def test_unresolved_inherited_fails(self, configured):
        with pytest.raises(InvalidArgumentError, match="must already be resolved"):
            resolve_selection_order(configured, SelectionOrder.INHERIT)

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            resolve_selection_order(None, None)

    def test_inputs_not_mutated(self):
        configured, inherited = SelectionOrder.INHERIT, SelectionOrder.SORTED
        resolve_selection_order(configured, inherited)
        assert configured is SelectionOrder.INHERIT
        assert inherited is SelectionOrder.SORTED


# ---------------------------------------------------------------------------
# 5. End-to-end chain, resolved root to leaf by hand
# ---------------------------------------------------------------------------

class TestRootToLeafChain:
    def test_root_child_grandchild(self):
        root = resolve_selection_order(None, SelectionOrder.RANDOM)
        child = resolve_selection_order(SelectionOrder.SORTED, root)
        grandchild = resolve_selection_order(SelectionOrder.INHERIT, child)
        assert (root, child, grandchild) == (
            SelectionOrder.RANDOM, SelectionOrder.SORTED, SelectionOrder.SORTED,
        )


# ---------------------------------------------------------------------------
# 6. Cache type resolution
# ---------------------------------------------------------------------------

class TestResolveCacheType:
    def test_unset_defaults_to_just_in_time(self):
        assert resolve_cache_type(None) is SelectionCacheType.JUST_IN_TIME

    def test_unset_takes_minimum(self):
        assert resolve_cache_type(None, SelectionCacheType.PHASE) is SelectionCacheType.PHASE

    def test_shorter_cache_raised_to_minimum(self):
        result = resolve_cache_type(SelectionCacheType.STEP, SelectionCacheType.PHASE)
        assert result is SelectionCacheType.PHASE

    def test_longer_cache_kept(self):
        result = resolve_cache_type(SelectionCacheType.SOLVER, SelectionCacheType.STEP)
        assert result is SelectionCacheType.SOLVER

    def test_just_in_time_kept_under_cached_parent(self):
        result = resolve_cache_type(SelectionCacheType.JUST_IN_TIME, SelectionCacheType.SOLVER)
        assert result is SelectionCacheType.JUST_IN_TIME

    def test_absent_minimum_fails(self):
        with pytest.raises(InvalidArgumentError):
            resolve_cache_type(SelectionCacheType.STEP, None)


# ---------------------------------------------------------------------------
# 7. Order / cache compatibility
# ---------------------------------------------------------------------------

class TestCacheCompatibility:
    @pytest.mark.parametrize("cache_type", list(SelectionCacheType))
    @pytest.mark.parametrize("order", RESOLVED_ORDERS)
    def test_every_pair(self, order, cache_type):
        if order.requires_caching and not cache_type.is_cached:
            with pytest.raises(IncompatibleCacheTypeError):
                validate_cache_compatibility(order, cache_type)
        else:
            validate_cache_compatibility(order, cache_type)

    def test_error_names_selector_and_values(self):
        with pytest.raises(IncompatibleCacheTypeError) as exc_info:
            validate_cache_compatibility(
                SelectionOrder.SHUFFLED, SelectionCacheType.JUST_IN_TIME,
                selector_name="swap_moves",
            )
        err = exc_info.value
        assert isinstance(err, SelectorConfigError)
        assert err.selector_name == "swap_moves"
        assert err.selection_order is SelectionOrder.SHUFFLED
        assert err.cache_type is SelectionCacheType.JUST_IN_TIME
        assert "swap_moves" in str(err)
        assert "SHUFFLED" in str(err)
        assert "JUST_IN_TIME" in str(err)

    def test_inherit_must_be_resolved_first(self):
        with pytest.raises(InvalidArgumentError):
            validate_cache_compatibility(SelectionOrder.INHERIT, SelectionCacheType.STEP)
