"""Core enumerations for selector configuration."""

from enum import Enum
from typing import Optional, Union

from selection_order.core.errors import SelectorConfigError


class SelectionOrder(str, Enum):
    """
    Defines in which order the elements of a selector are selected.

    Members:
        INHERIT:       Use the parent selector's order.  Defaults to RANDOM
                       when there is no parent.  Only valid as a configured
                       value, never as a resolved one.
        ORIGINAL:      Select the elements in original order.
        SORTED:        Select in sorted order by sorting the elements.  Each
                       element is selected exactly once per pass.  Requires
                       cache type STEP or higher.
        RANDOM:        Select in random order, without shuffling the
                       elements.  An element might be selected multiple
                       times.  Scales well because it needs no caching.
        SHUFFLED:      Select in random order by shuffling the elements when
                       a selection iterator is created.  Each element is
                       selected exactly once per pass.  Requires cache type
                       STEP or higher.
        PROBABILISTIC: Select in random order, based on the selection
                       probability of each element.  An element might be
                       selected multiple times.  Requires cache type STEP or
                       higher.
    """

    INHERIT = "INHERIT"
    ORIGINAL = "ORIGINAL"
    SORTED = "SORTED"
    RANDOM = "RANDOM"
    SHUFFLED = "SHUFFLED"
    PROBABILISTIC = "PROBABILISTIC"

    @property
    def is_resolved(self) -> bool:
        """True for every member except INHERIT."""
        return self is not SelectionOrder.INHERIT

    @property
    def requires_caching(self) -> bool:
        """True if the order can only be applied to a cached selector."""
        return self in _CACHED_ORDERS

    @property
    def selects_each_once(self) -> bool:
        """True if every element is selected exactly once per pass."""
        return self in _EXACTLY_ONCE_ORDERS

    def to_random_selection(self) -> bool:
        """
        Map RANDOM/ORIGINAL onto the plain ``random_selection`` flag.

        Raises:
            SelectorConfigError: for any other member, which has no boolean
                equivalent.
        """
        if self is SelectionOrder.RANDOM:
            return True
        if self is SelectionOrder.ORIGINAL:
            return False
        raise SelectorConfigError(
            f"The selection order ({self.value}) cannot be converted to a "
            f"random selection flag."
        )

    @classmethod
    def from_random_selection(cls, random_selection: bool) -> "SelectionOrder":
        return cls.RANDOM if random_selection else cls.ORIGINAL

    @classmethod
    def parse(
        cls, value: Union["SelectionOrder", str, None]
    ) -> Optional["SelectionOrder"]:
        """
        Coerce a configuration value to a member.

        Accepts a member, a case-insensitive member name, or None (unset).

        Raises:
            SelectorConfigError: if the name is unknown.
        """
        return _parse_member(cls, value, "selection order")


class SelectionCacheType(str, Enum):
    """
    How long a selector's computed elements stay valid.

    Ordered from shortest- to longest-lived, and compares that way:
    ``JUST_IN_TIME < STEP < PHASE < SOLVER``.
    """

    JUST_IN_TIME = "JUST_IN_TIME"
    STEP = "STEP"
    PHASE = "PHASE"
    SOLVER = "SOLVER"

    @property
    def rank(self) -> int:
        return _CACHE_RANKS[self]

    @property
    def is_cached(self) -> bool:
        return self is not SelectionCacheType.JUST_IN_TIME

    def __lt__(self, other):
        if not isinstance(other, SelectionCacheType):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, SelectionCacheType):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, SelectionCacheType):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, SelectionCacheType):
            return NotImplemented
        return self.rank >= other.rank

    @classmethod
    def max(
        cls, a: "SelectionCacheType", b: "SelectionCacheType"
    ) -> "SelectionCacheType":
        """Return the longer-lived of two cache types."""
        return a if a >= b else b

    @classmethod
    def parse(
        cls, value: Union["SelectionCacheType", str, None]
    ) -> Optional["SelectionCacheType"]:
        return _parse_member(cls, value, "cache type")


# ─────────────────────────────────────────────────────────────────────────────
# Member groups
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_ROOT_SELECTION_ORDER = SelectionOrder.RANDOM

_CACHED_ORDERS = frozenset({
    SelectionOrder.SORTED,
    SelectionOrder.SHUFFLED,
    SelectionOrder.PROBABILISTIC,
})

_EXACTLY_ONCE_ORDERS = frozenset({
    SelectionOrder.ORIGINAL,
    SelectionOrder.SORTED,
    SelectionOrder.SHUFFLED,
})

_CACHE_RANKS = {
    SelectionCacheType.JUST_IN_TIME: 0,
    SelectionCacheType.STEP: 1,
    SelectionCacheType.PHASE: 2,
    SelectionCacheType.SOLVER: 3,
}


def _parse_member(enum_cls, value, label: str):
    if value is None or isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    raise SelectorConfigError(
        f"Unknown {label}: {value!r}. "
        f"Available: {[member.value for member in enum_cls]}"
    )
