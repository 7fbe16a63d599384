"""
Selector tree resolution — turns a SelectorConfig tree into frozen runtime
descriptors.

The walk is top-down and single pass: a node is only resolved once its
parent is, so the inherited order handed to ``resolve_selection_order`` is
always concrete.  Nodes of the same depth do not depend on each other; with
``ResolverSettings.max_workers > 1`` each level is resolved on a thread pool.

Example:
    >>> from selection_order.config import SelectorConfig
    >>> root = SelectorConfig.from_dict({
    ...     "name": "moves",
    ...     "children": [{"name": "entities", "selection_order": "SORTED",
    ...                   "cache_type": "STEP"}],
    ... })
    >>> resolved = SelectorTreeResolver().resolve(root)
    >>> resolved.selection_order, resolved.find("entities").selection_order
    (<SelectionOrder.RANDOM: 'RANDOM'>, <SelectionOrder.SORTED: 'SORTED'>)
"""

from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, Optional

from selection_order.config import ResolverSettings, SelectorConfig
from selection_order.core.errors import SelectorConfigError
from selection_order.core.models import SelectionCacheType, SelectionOrder
from selection_order.core.resolver import (
    resolve_cache_type,
    resolve_selection_order,
    validate_cache_compatibility,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Runtime descriptor
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ResolvedSelector:
    """
    A selector with its order and cache type frozen.

    Attributes:
        name:            Selector name.
        selection_order: Effective order (never INHERIT).
        cache_type:      Effective cache scope.
        depth:           0 for the root, parent depth + 1 otherwise.
        children:        Resolved child selectors, in declaration order.
    """
    name: str
    selection_order: SelectionOrder
    cache_type: SelectionCacheType
    depth: int = 0
    children: tuple[ResolvedSelector, ...] = ()

    @property
    def is_random_selection(self) -> bool:
        """True for orders that pick elements randomly (may differ per run)."""
        return self.selection_order in (
            SelectionOrder.RANDOM,
            SelectionOrder.SHUFFLED,
            SelectionOrder.PROBABILISTIC,
        )

    def walk(self) -> Iterator[ResolvedSelector]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, name: str) -> Optional[ResolvedSelector]:
        """Return the descendant (or self) called *name*, or None."""
        for node in self.walk():
            if node.name == name:
                return node
        return None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "selection_order": self.selection_order.value,
            "cache_type": self.cache_type.value,
            "depth": self.depth,
            "children": [child.to_dict() for child in self.children],
        }


# ─────────────────────────────────────────────────────────────────────────────
# Tree resolver
# ─────────────────────────────────────────────────────────────────────────────

# (node, inherited order, inherited cache type)
_Pending = tuple[SelectorConfig, SelectionOrder, SelectionCacheType]


class SelectorTreeResolver:
    """
    Resolves every node of a selector configuration tree, root to leaf.

    Errors from the resolver functions (InvalidArgumentError,
    IncompatibleCacheTypeError) propagate to the caller unchanged.
    """

    def __init__(self, settings: Optional[ResolverSettings] = None) -> None:
        self.settings = settings or ResolverSettings()

    def resolve(self, root: SelectorConfig) -> ResolvedSelector:
        """
        Resolve a whole tree.

        Raises:
            SelectorConfigError: duplicate selector names, or an order that
                needs a cache on an uncached selector.
        """
        self._check_unique_names(root)

        if self.settings.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
                resolved = self._resolve_levels(root, executor)
        else:
            resolved = self._resolve_levels(root, None)

        result = self._assemble(root, resolved, depth=0)
        logger.info(
            "Resolved selector tree '%s' (%d nodes, root order %s)",
            root.name, len(resolved), result.selection_order.value,
        )
        return result

    def resolve_many(self, roots: list[SelectorConfig]) -> list[ResolvedSelector]:
        """Resolve several independent top-level selectors."""
        return [self.resolve(root) for root in roots]

    # ── Internals ────────────────────────────────────────────────────────────

    def _resolve_levels(
        self,
        root: SelectorConfig,
        executor: Optional[ThreadPoolExecutor],
    ) -> dict[str, tuple[SelectionOrder, SelectionCacheType]]:
        resolved: dict[str, tuple[SelectionOrder, SelectionCacheType]] = {}
        frontier: list[_Pending] = [
            (root, self.settings.root_selection_order, SelectionCacheType.JUST_IN_TIME)
        ]
        while frontier:
            if executor is None:
                results = [self._resolve_node(pending) for pending in frontier]
            else:
                results = list(executor.map(self._resolve_node, frontier))

            next_frontier: list[_Pending] = []
            for (node, _, _), (order, cache_type) in zip(frontier, results):
                resolved[node.name] = (order, cache_type)
                passed_order = order
                if self.settings.cached_parent_passes_original and cache_type.is_cached:
                    passed_order = SelectionOrder.ORIGINAL
                next_frontier.extend(
                    (child, passed_order, cache_type) for child in node.children
                )
            frontier = next_frontier
        return resolved

    def _resolve_node(
        self, pending: _Pending
    ) -> tuple[SelectionOrder, SelectionCacheType]:
        node, inherited_order, inherited_cache_type = pending
        order = resolve_selection_order(node.selection_order, inherited_order)
        cache_type = resolve_cache_type(node.cache_type, inherited_cache_type)
        if self.settings.validate_cache_types:
            validate_cache_compatibility(order, cache_type, selector_name=node.name)
        logger.debug(
            "Selector '%s': order %s -> %s, cache %s -> %s",
            node.name,
            node.selection_order.value if node.selection_order else None,
            order.value,
            node.cache_type.value if node.cache_type else None,
            cache_type.value,
        )
        return order, cache_type

    def _assemble(
        self,
        node: SelectorConfig,
        resolved: dict[str, tuple[SelectionOrder, SelectionCacheType]],
        depth: int,
    ) -> ResolvedSelector:
        order, cache_type = resolved[node.name]
        return ResolvedSelector(
            name=node.name,
            selection_order=order,
            cache_type=cache_type,
            depth=depth,
            children=tuple(
                self._assemble(child, resolved, depth + 1) for child in node.children
            ),
        )

    @staticmethod
    def _check_unique_names(root: SelectorConfig) -> None:
        counts = Counter(node.name for node in root.walk())
        duplicates = sorted(name for name, count in counts.items() if count > 1)
        if duplicates:
            raise SelectorConfigError(
                f"Selector names must be unique within a tree, duplicated: {duplicates}"
            )


def resolve_tree(
    root: SelectorConfig, settings: Optional[ResolverSettings] = None
) -> ResolvedSelector:
    """Shortcut for ``SelectorTreeResolver(settings).resolve(root)``."""
    return SelectorTreeResolver(settings).resolve(root)
