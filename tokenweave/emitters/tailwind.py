"""
Tailwind Emitter - theme extension pointing at CSS custom properties.

Every leaf becomes ``var(--<derived-path>)``; the resolved literal is never
inlined, so the CSS files stay the single runtime source of truth.

Category mapping (token tree -> Tailwind theme key):
    color                       -> colors
    typography.fontFamily       -> fontFamily
    typography.fontSize         -> fontSize
    typography.lineHeight       -> lineHeight
    typography.letterSpacing    -> letterSpacing
    typography.tracking         -> letterSpacing (merged)
    spacing                     -> spacing
    radius                      -> borderRadius
    shadow                      -> boxShadow
    breakpoint                  -> screens
    animation.duration          -> transitionDuration
    animation.easing            -> transitionTimingFunction
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

from ..tree import COLOR_KEY, THEME_KEY, Token, TokenGroup, join_path, unwrap_theme
from .base import write_output

# (source path in the tree, Tailwind theme key); order is output order
TAILWIND_CATEGORIES: tuple[tuple[str, str], ...] = (
    ("color", "colors"),
    ("typography.fontFamily", "fontFamily"),
    ("typography.fontSize", "fontSize"),
    ("typography.lineHeight", "lineHeight"),
    ("typography.letterSpacing", "letterSpacing"),
    ("typography.tracking", "letterSpacing"),
    ("spacing", "spacing"),
    ("radius", "borderRadius"),
    ("shadow", "boxShadow"),
    ("breakpoint", "screens"),
    ("animation.duration", "transitionDuration"),
    ("animation.easing", "transitionTimingFunction"),
)


def css_var_tree(group: TokenGroup, prefix: str) -> dict[str, Any]:
    """Mirror ``group`` as nested dicts of ``var(--path)`` strings."""
    result: dict[str, Any] = {}
    for key, child in group.items():
        if key == THEME_KEY:
            continue
        path = join_path(prefix, key)
        if isinstance(child, Token):
            result[key] = f"var(--{path})"
        elif isinstance(child, TokenGroup):
            nested = css_var_tree(child, path)
            if nested:
                result[key] = nested
    return result


def _category_root(tree: TokenGroup) -> TokenGroup:
    """
    Return the group categories are looked up in.

    Theme trees expose ``theme.<variant>.color`` as a top-level ``color``
    category so their paths match the CSS emitter's collapsed naming.
    """
    theme = tree.group(THEME_KEY)
    if theme is None or tree.group(COLOR_KEY) is not None:
        return tree
    _, colors = unwrap_theme(theme)
    if colors is None:
        return tree
    root = TokenGroup(tree.children)
    root.add(COLOR_KEY, colors)
    return root


@dataclass(frozen=True)
class TailwindEmitter:
    """Build and serialize a ``theme.extend`` configuration object."""

    def build_theme(self, tree: TokenGroup) -> dict[str, Any]:
        """Map token categories onto Tailwind theme keys."""
        root = _category_root(tree)
        theme: dict[str, Any] = {}
        for source_path, theme_key in TAILWIND_CATEGORIES:
            group = root.get(source_path)
            if not isinstance(group, TokenGroup):
                continue
            values = css_var_tree(group, source_path.replace(".", "-"))
            if not values:
                continue
            theme.setdefault(theme_key, {}).update(values)
        return theme

    def build_config(self, tree: TokenGroup) -> dict[str, Any]:
        return {"theme": {"extend": self.build_theme(tree)}}

    def emit(self, tree: TokenGroup) -> str:
        config = json.dumps(self.build_config(tree), indent=2, ensure_ascii=False)
        return f"export default {config};\n"

    def save(self, tree: TokenGroup, path: Union[str, Path]) -> Path:
        return write_output(path, self.emit(tree))


def generate_tailwind(tree: TokenGroup) -> str:
    """Convenience wrapper around ``TailwindEmitter.emit``."""
    return TailwindEmitter().emit(tree)
