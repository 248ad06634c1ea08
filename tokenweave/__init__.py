"""
Tokenweave - compile hierarchical design tokens into platform outputs.

One token document (source palette plus light/dark theme overlays) becomes
CSS custom properties, legacy flat CSS, a Tailwind theme extension,
TypeScript/JavaScript token exports and C# static classes, all sharing the
same path naming.

Usage:
    from tokenweave import parse_tree, SourceScope, CSSEmitter

    source = parse_tree({"color": {"primary": {"value": "#00cc92", "type": "color"}}})
    light = parse_tree({"theme": {"light": {"color": {
        "primary": {"value": "{core.ivy-framework.source.color.primary}", "type": "color"},
    }}}})
    scope = SourceScope("core.ivy-framework", source)
    print(CSSEmitter(scope=scope).emit(light))
"""

from .tree import (
    Token,
    TokenGroup,
    TokenEntry,
    parse_tree,
    walk_tokens,
    token_paths,
    to_pascal_case,
    to_kebab_case,
)
from .references import SourceScope, Reference, parse_reference, resolve_reference, is_reference
from .merge import deep_merge, merge_documents, merge_trees
from .emitters import (
    CSSEmitter,
    FlatCSSEmitter,
    AliasTable,
    ROOT_ALIASES,
    DARK_ALIASES,
    TailwindEmitter,
    TypeEmitter,
    CSharpEmitter,
    generate_css,
    generate_flat_css,
    generate_tailwind,
    generate_types,
    generate_csharp,
)
from .validation import validate_document, ValidationReport, ValidationIssue
from .config import BuildConfig
from .exceptions import (
    TokenweaveError,
    TokenTreeError,
    InvalidTokenDocumentError,
    DuplicateTokenPathError,
    DuplicatePropertyNameError,
    TokenReferenceError,
    ReferenceScopeMismatchError,
    TokenValidationError,
    VersionError,
    InvalidVersionError,
    VersionMismatchError,
    ManifestError,
    BuildError,
    TokenFileError,
    OutputWriteError,
)

__version__ = "1.0.0"

__all__ = [
    # Tree
    "Token",
    "TokenGroup",
    "TokenEntry",
    "parse_tree",
    "walk_tokens",
    "token_paths",
    "to_pascal_case",
    "to_kebab_case",
    # References
    "SourceScope",
    "Reference",
    "parse_reference",
    "resolve_reference",
    "is_reference",
    # Merge
    "deep_merge",
    "merge_documents",
    "merge_trees",
    # Emitters
    "CSSEmitter",
    "FlatCSSEmitter",
    "AliasTable",
    "ROOT_ALIASES",
    "DARK_ALIASES",
    "TailwindEmitter",
    "TypeEmitter",
    "CSharpEmitter",
    "generate_css",
    "generate_flat_css",
    "generate_tailwind",
    "generate_types",
    "generate_csharp",
    # Validation
    "validate_document",
    "ValidationReport",
    "ValidationIssue",
    # Config
    "BuildConfig",
    # Exceptions
    "TokenweaveError",
    "TokenTreeError",
    "InvalidTokenDocumentError",
    "DuplicateTokenPathError",
    "DuplicatePropertyNameError",
    "TokenReferenceError",
    "ReferenceScopeMismatchError",
    "TokenValidationError",
    "VersionError",
    "InvalidVersionError",
    "VersionMismatchError",
    "ManifestError",
    "BuildError",
    "TokenFileError",
    "OutputWriteError",
]
