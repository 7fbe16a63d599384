"""Shared fixtures for the selection_order test suite."""

import os
import sys

import pytest

# Ensure the src/ layout is importable without an installed package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from selection_order.config import SelectorConfig  # noqa: E402
from selection_order.core.models import SelectionOrder  # noqa: E402


# Every member except INHERIT: the values a resolved selector can carry.
RESOLVED_ORDERS = [order for order in SelectionOrder if order.is_resolved]


@pytest.fixture
def three_level_tree():
    """Root unset, child SORTED with a STEP cache, grandchild explicit INHERIT."""
    return SelectorConfig.from_dict({
        "name": "root",
        "children": [
            {
                "name": "child",
                "selection_order": "SORTED",
                "cache_type": "STEP",
                "children": [
                    {"name": "grandchild", "selection_order": "INHERIT"},
                ],
            },
        ],
    })


@pytest.fixture
def wide_tree():
    """Root with several independent branches of mixed configuration."""
    return SelectorConfig.from_dict({
        "name": "union",
        "selection_order": "RANDOM",
        "children": [
            {
                "name": "change_moves",
                "selection_order": "SHUFFLED",
                "cache_type": "PHASE",
                "children": [
                    {"name": "change_entities"},
                    {"name": "change_values", "selection_order": "ORIGINAL"},
                ],
            },
            {
                "name": "swap_moves",
                "children": [
                    {"name": "swap_left", "selection_order": "ORIGINAL"},
                    {"name": "swap_right"},
                ],
            },
            {
                "name": "weighted_moves",
                "selection_order": "PROBABILISTIC",
                "cache_type": "STEP",
                "children": [
                    {"name": "weighted_entities", "cache_type": "SOLVER"},
                    {"name": "weighted_values", "cache_type": "JUST_IN_TIME",
                     "selection_order": "RANDOM"},
                ],
            },
        ],
    })
