"""
CSS Emitter - design tokens as CSS custom properties.

Output shape:
    @layer base {
      :root {
      --color-primary: #00cc92;
      }
    }

Dark trees use the ``.dark`` selector instead of ``:root``.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from ..references import SourceScope
from ..tree import TokenGroup
from .base import layer_block, resolved_entries, selector_for, write_output


@dataclass(frozen=True)
class CSSEmitter:
    """
    Emit one custom property per token, named by its derived path.

    Attributes:
        is_dark: Use ``.dark`` instead of ``:root``
        scope: Source scope for resolving placeholder values
    """
    is_dark: bool = False
    scope: Optional[SourceScope] = None

    @property
    def selector(self) -> str:
        return selector_for(self.is_dark)

    def declarations(self, tree: TokenGroup) -> str:
        lines = [
            f"  --{entry.path}: {value};\n"
            for entry, value in resolved_entries(tree, self.scope)
        ]
        return "".join(lines)

    def emit(self, tree: TokenGroup) -> str:
        return layer_block(self.selector, self.declarations(tree))

    def save(self, tree: TokenGroup, path: Union[str, Path]) -> Path:
        return write_output(path, self.emit(tree))


def generate_css(
    tree: TokenGroup,
    is_dark: bool = False,
    scope: Optional[SourceScope] = None,
) -> str:
    """Convenience wrapper around ``CSSEmitter.emit``."""
    return CSSEmitter(is_dark=is_dark, scope=scope).emit(tree)
