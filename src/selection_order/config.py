"""
Configuration models for selector trees.

Classes:
    SelectorConfig   — one node of a selector configuration tree (immutable)
    ResolverSettings — tuneable parameters for resolving a whole tree
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from selection_order.core.errors import SelectorConfigError
from selection_order.core.models import (
    DEFAULT_ROOT_SELECTION_ORDER,
    SelectionCacheType,
    SelectionOrder,
)


# ─────────────────────────────────────────────────────────────────────────────
# Selector configuration node
# ─────────────────────────────────────────────────────────────────────────────

class SelectorConfig(BaseModel):
    """
    Raw configuration of one selector and its child selectors.

    Both ``selection_order`` and ``cache_type`` may be left unset; the tree
    resolver fills them in from the parent.  Enum fields accept members or
    case-insensitive names (``"sorted"``, ``"STEP"``).

    Attributes:
        name:            Unique name of the selector within its tree.
        selection_order: Configured order, or None / INHERIT for "inherit".
        cache_type:      Configured cache scope, or None for "inherit".
        children:        Child selector configs, in declaration order.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Selector name, unique per tree")
    selection_order: SelectionOrder | None = Field(
        default=None, description="Configured selection order"
    )
    cache_type: SelectionCacheType | None = Field(
        default=None, description="Configured cache scope"
    )
    children: tuple[SelectorConfig, ...] = Field(
        default=(), description="Child selectors"
    )

    @field_validator("selection_order", mode="before")
    @classmethod
    def _coerce_selection_order(cls, value: Any) -> Any:
        return SelectionOrder.parse(value)

    @field_validator("cache_type", mode="before")
    @classmethod
    def _coerce_cache_type(cls, value: Any) -> Any:
        return SelectionCacheType.parse(value)

    def walk(self) -> Iterator[SelectorConfig]:
        """Yield this node and all descendants, parents before children."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_dict(cls, d: dict) -> SelectorConfig:
        return cls.model_validate(d)


SelectorConfig.model_rebuild()


# ─────────────────────────────────────────────────────────────────────────────
# Resolver settings
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ResolverSettings:
    """
    Tuneable parameters for SelectorTreeResolver.

    Attributes:
        root_selection_order:          Order inherited by a root selector.
        validate_cache_types:          Reject orders that need a cache on
                                       uncached selectors.
        cached_parent_passes_original: Children of a cached selector inherit
                                       ORIGINAL instead of the parent's order
                                       (the parent's cache already applies it).
        max_workers:                   Threads used to resolve the nodes of
                                       one tree level.  1 = sequential.
    """
    root_selection_order: SelectionOrder = DEFAULT_ROOT_SELECTION_ORDER
    validate_cache_types: bool = True
    cached_parent_passes_original: bool = False
    max_workers: int = 1

    def __post_init__(self) -> None:
        if not self.root_selection_order.is_resolved:
            raise SelectorConfigError(
                f"The root_selection_order ({self.root_selection_order.value}) "
                f"must be a concrete order."
            )
        if self.max_workers < 1:
            raise SelectorConfigError(
                f"max_workers must be at least 1, got {self.max_workers}"
            )

    def to_dict(self) -> dict:
        return {
            "root_selection_order": self.root_selection_order.value,
            "validate_cache_types": self.validate_cache_types,
            "cached_parent_passes_original": self.cached_parent_passes_original,
            "max_workers": self.max_workers,
        }

    @classmethod
    def from_dict(cls, d: dict) -> ResolverSettings:
        d = dict(d)
        root_order = SelectionOrder.parse(d.pop("root_selection_order", None))
        if root_order is not None:
            d["root_selection_order"] = root_order
        return cls(**d)
