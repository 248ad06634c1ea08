"""
Shared helpers for emitters.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from ..references import SourceScope, resolve_reference
from ..tree import TokenEntry, TokenGroup, walk_tokens

logger = logging.getLogger(__name__)

ROOT_SELECTOR = ":root"
DARK_SELECTOR = ".dark"


def selector_for(is_dark: bool) -> str:
    return DARK_SELECTOR if is_dark else ROOT_SELECTOR


def layer_block(selector: str, declarations: str) -> str:
    """Wrap custom-property declarations in an ``@layer base`` block."""
    return f"@layer base {{\n  {selector} {{\n{declarations}  }}\n}}\n"


def resolved_entries(
    tree: TokenGroup,
    scope: Optional[SourceScope] = None,
    qualify_theme: bool = False,
) -> list[tuple[TokenEntry, str]]:
    """Walk ``tree`` and pair each entry with its resolved value."""
    return [
        (entry, resolve_reference(entry.value, scope))
        for entry in walk_tokens(tree, qualify_theme=qualify_theme)
    ]


def write_output(path: Union[str, Path], content: str) -> Path:
    """Write generated text, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {path}")
    return path
