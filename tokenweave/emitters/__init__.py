"""
Tokenweave Emitters - serialize a token tree for each target platform.

Emitters:
- CSSEmitter: nested custom properties (``--color-primary``)
- FlatCSSEmitter: legacy flat names through an alias table (``--primary``)
- TailwindEmitter: ``theme.extend`` object of ``var(--path)`` references
- TypeEmitter: ``TokenName`` union and runtime token map
- CSharpEmitter: static classes with reflection helpers

Emitters never mutate the tree, so they can run in any order against the
same merged tree.
"""

from .css import CSSEmitter, generate_css
from .flat_css import (
    AliasTable,
    FlatCSSEmitter,
    ROOT_ALIASES,
    DARK_ALIASES,
    generate_flat_css,
)
from .tailwind import TAILWIND_CATEGORIES, TailwindEmitter, generate_tailwind
from .types import TypeEmitter, TypeOutput, generate_types
from .csharp import CSharpEmitter, generate_csharp

__all__ = [
    "CSSEmitter",
    "generate_css",
    "AliasTable",
    "FlatCSSEmitter",
    "ROOT_ALIASES",
    "DARK_ALIASES",
    "generate_flat_css",
    "TAILWIND_CATEGORIES",
    "TailwindEmitter",
    "generate_tailwind",
    "TypeEmitter",
    "TypeOutput",
    "generate_types",
    "CSharpEmitter",
    "generate_csharp",
]
