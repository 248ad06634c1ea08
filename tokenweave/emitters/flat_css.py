"""
Flat CSS Emitter - legacy flat custom-property names.

Structured token paths are renamed through an explicit alias table so the
frontend keeps its historical variable names (``--primary`` instead of
``--color-primary``). Tokens without an alias are dropped by strict tables
and fall back to their bare leaf key with permissive tables.

Paths are derived with qualified theme naming, so dark trees produce
``theme-dark-color-*`` keys; the dark table is keyed accordingly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Union

from ..references import SourceScope
from ..tree import TokenEntry, TokenGroup
from .base import layer_block, resolved_entries, selector_for, write_output

logger = logging.getLogger(__name__)

# Frontend variable names shared by both themes
_FLAT_NAMES = (
    # Semantic colors
    "primary",
    "primary-foreground",
    "secondary",
    "secondary-foreground",
    "destructive",
    "destructive-foreground",
    "success",
    "success-foreground",
    "warning",
    "warning-foreground",
    "info",
    "info-foreground",
    # UI colors
    "background",
    "foreground",
    "border",
    "input",
    "ring",
    "muted",
    "muted-foreground",
    "accent",
    "accent-foreground",
    "card",
    "card-foreground",
    "popover",
    "popover-foreground",
)


@dataclass(frozen=True)
class AliasTable:
    """
    Immutable structured-path -> flat-name lookup.

    Attributes:
        mapping: Structured token path to flat variable name
        strict: Drop unmapped tokens instead of falling back to the leaf key
    """
    mapping: Mapping[str, str] = field(default_factory=dict)
    strict: bool = False

    def __post_init__(self):
        object.__setattr__(self, "mapping", MappingProxyType(dict(self.mapping)))

    def flat_name(self, entry: TokenEntry) -> Optional[str]:
        """Flat name for a token, or None when it should be dropped."""
        alias = self.mapping.get(entry.path)
        if alias is not None:
            return alias
        if self.strict:
            logger.debug(f"No flat alias for {entry.path}; dropped")
            return None
        return entry.key

    def as_strict(self) -> "AliasTable":
        return replace(self, strict=True)

    def as_permissive(self) -> "AliasTable":
        return replace(self, strict=False)


ROOT_ALIASES = AliasTable({f"color-{name}": name for name in _FLAT_NAMES})
DARK_ALIASES = AliasTable({f"theme-dark-color-{name}": name for name in _FLAT_NAMES})


@dataclass(frozen=True)
class FlatCSSEmitter:
    """
    Emit custom properties under flat alias names.

    Attributes:
        is_dark: Use ``.dark`` and the dark alias table
        scope: Source scope for resolving placeholder values
        aliases: Explicit alias table; defaults to the built-in table for
            the selector
    """
    is_dark: bool = False
    scope: Optional[SourceScope] = None
    aliases: Optional[AliasTable] = None

    @property
    def selector(self) -> str:
        return selector_for(self.is_dark)

    @property
    def table(self) -> AliasTable:
        if self.aliases is not None:
            return self.aliases
        return DARK_ALIASES if self.is_dark else ROOT_ALIASES

    def declarations(self, tree: TokenGroup) -> str:
        table = self.table
        lines = []
        for entry, value in resolved_entries(tree, self.scope, qualify_theme=True):
            name = table.flat_name(entry)
            if name is not None:
                lines.append(f"  --{name}: {value};\n")
        return "".join(lines)

    def emit(self, tree: TokenGroup) -> str:
        return layer_block(self.selector, self.declarations(tree))

    def save(self, tree: TokenGroup, path: Union[str, Path]) -> Path:
        return write_output(path, self.emit(tree))


def generate_flat_css(
    tree: TokenGroup,
    is_dark: bool = False,
    scope: Optional[SourceScope] = None,
    aliases: Optional[AliasTable] = None,
) -> str:
    """Convenience wrapper around ``FlatCSSEmitter.emit``."""
    return FlatCSSEmitter(is_dark=is_dark, scope=scope, aliases=aliases).emit(tree)
