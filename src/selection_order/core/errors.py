"""
Errors raised while resolving selector configuration.

Two families:
  - InvalidArgumentError   — the caller broke a call contract (e.g. passed no
                             inherited order).  A programming error, never
                             caught inside this package.
  - SelectorConfigError    — the configuration itself is wrong (unknown
                             order name, order that needs a cache on an
                             uncached selector, duplicate node names).

Both subclass ValueError so callers that only care about "bad input" can
catch that.
"""

from typing import Optional


class SelectionOrderError(Exception):
    """Base class for all selection order errors."""


class InvalidArgumentError(SelectionOrderError, ValueError):
    """A resolver precondition was violated by the caller."""


class SelectorConfigError(SelectionOrderError, ValueError):
    """A selector configuration value is invalid."""


class IncompatibleCacheTypeError(SelectorConfigError):
    """The selection order needs a longer-lived cache than the selector has."""

    def __init__(
        self,
        selection_order,
        cache_type,
        selector_name: Optional[str] = None,
    ) -> None:
        self.selection_order = selection_order
        self.cache_type = cache_type
        self.selector_name = selector_name
        where = f"Selector '{selector_name}'" if selector_name else "A selector"
        super().__init__(
            f"{where} has selection order {selection_order.value} which requires "
            f"cache type STEP or higher, but its cache type is {cache_type.value}."
        )
