"""
Build driver - compile a token document into every output format.

Pipeline:
    JSON document -> overlays merged -> product scope extracted ->
    CSS / flat CSS / Tailwind / TS+JS / C# emitters -> dist/

Usage:
    tokenweave figma-tokens/$tokens.json --out dist
    tokenweave-sync-version 1.2.0

Output layout:
    dist/css/<product>.css, light.css, dark.css, <product>-flat.css, dark-flat.css
    dist/tailwind/<product>.js
    dist/js/index.js, index.d.ts
    dist/csharp/<Product>Tokens.cs, LightThemeTokens.cs, DarkThemeTokens.cs
    dist/tokens/index.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional

from .config import BuildConfig
from .emitters import (
    CSharpEmitter,
    CSSEmitter,
    DARK_ALIASES,
    FlatCSSEmitter,
    ROOT_ALIASES,
    TailwindEmitter,
    TypeEmitter,
)
from .emitters.base import write_output
from .exceptions import OutputWriteError, TokenFileError, TokenweaveError
from .merge import merge_documents
from .references import SourceScope
from .tree import TokenGroup, parse_tree, walk_tokens
from .validation import validate_document
from .versioning import ensure_synchronized, sync_versions

logger = logging.getLogger(__name__)


@dataclass
class ProductTokens:
    """The token subsets fed to the emitters for one product."""
    source: TokenGroup
    light: TokenGroup
    dark: TokenGroup
    scope: SourceScope


@dataclass
class BuildResult:
    """Files written by a build."""
    files: list[Path] = field(default_factory=list)
    token_count: int = 0


def load_document(path: Path) -> dict[str, Any]:
    """
    Read and parse a JSON token document.

    Raises:
        TokenFileError: If the file is missing, unreadable, or not an object.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise TokenFileError(str(path), f"{type(e).__name__}: {e}") from e
    except UnicodeDecodeError as e:
        raise TokenFileError(str(path), f"not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise TokenFileError(str(path), f"invalid JSON: {e}") from e
    if not isinstance(data, dict):
        raise TokenFileError(str(path), "top level must be a JSON object")
    return data


def _theme_tree(variant: str, body: Any) -> TokenGroup:
    return parse_tree({"theme": {variant: body if isinstance(body, Mapping) else {}}})


def extract_product(
    document: Mapping[str, Any],
    product: str,
    scope_id: Optional[str] = None,
) -> ProductTokens:
    """
    Split a document into source, light and dark trees for ``product``.

    Supports the layered layout (``core.<product>.source`` /
    ``core.<product>.theme.<variant>``) and the flat layout (``<product>`` /
    ``theme.<variant>``).
    """
    core = document.get("core")
    if isinstance(core, Mapping) and isinstance(core.get(product), Mapping):
        scope_tokens = core[product]
        themes = scope_tokens.get("theme") or {}
        default_scope = f"core.{product}"
    else:
        scope_tokens = document.get(product) or {}
        themes = document.get("theme") or {}
        default_scope = product

    if not isinstance(scope_tokens, Mapping):
        scope_tokens = {}
    source = scope_tokens.get("source", scope_tokens)
    if not isinstance(source, Mapping):
        source = {}
    source_tree = parse_tree({k: v for k, v in source.items() if k != "theme"})
    return ProductTokens(
        source=source_tree,
        light=_theme_tree("light", themes.get("light") if isinstance(themes, Mapping) else None),
        dark=_theme_tree("dark", themes.get("dark") if isinstance(themes, Mapping) else None),
        scope=SourceScope(scope_id or default_scope, source_tree),
    )


def _save(result: BuildResult, path: Path, content: str) -> None:
    try:
        result.files.append(write_output(path, content))
    except OSError as e:
        raise OutputWriteError(str(path), f"{type(e).__name__}: {e}") from e


def build(config: BuildConfig, generated_at: Optional[datetime] = None) -> BuildResult:
    """
    Run the full build described by ``config``.

    Raises:
        TokenweaveError: On version mismatch, unreadable input, unresolvable
            scope references, or write failures.
    """
    logger.info("Building Ivy Design System")
    if config.check_versions:
        ensure_synchronized(config.package_json_path, config.csproj_path)

    document = load_document(config.tokens_path)
    if config.overlays:
        document = merge_documents(document, *(load_document(p) for p in config.overlays))
        logger.info(f"Merged {len(config.overlays)} overlay(s)")

    if config.validate:
        report = validate_document(document, config.product)
        for issue in report.issues:
            logger.warning(f"Validation {issue.severity.value}: {issue}")
        report.raise_for_issues()

    tokens = extract_product(document, config.product, config.scope_id)
    scope = tokens.scope
    out = config.output_dir
    result = BuildResult(token_count=len(walk_tokens(tokens.source)))
    product = config.product

    root_aliases = ROOT_ALIASES.as_strict() if config.strict_aliases else ROOT_ALIASES
    dark_aliases = DARK_ALIASES.as_strict() if config.strict_aliases else DARK_ALIASES

    # CSS
    _save(result, out / "css" / f"{product}.css", CSSEmitter().emit(tokens.source))
    _save(result, out / "css" / "light.css", CSSEmitter(scope=scope).emit(tokens.light))
    _save(result, out / "css" / "dark.css", CSSEmitter(is_dark=True, scope=scope).emit(tokens.dark))
    _save(
        result,
        out / "css" / f"{product}-flat.css",
        FlatCSSEmitter(aliases=root_aliases).emit(tokens.source),
    )
    _save(
        result,
        out / "css" / "dark-flat.css",
        FlatCSSEmitter(is_dark=True, scope=scope, aliases=dark_aliases).emit(tokens.dark),
    )

    # Tailwind
    _save(result, out / "tailwind" / f"{product}.js", TailwindEmitter().emit(tokens.source))

    # TypeScript / JavaScript
    types = TypeEmitter().emit(tokens.source)
    _save(result, out / "js" / "index.js", types.module)
    _save(result, out / "js" / "index.d.ts", types.declarations)
    logger.info(f"Generated {len(types.token_names)} token exports")

    # C#
    csharp_targets = (
        (tokens.source, f"{config.class_prefix}Tokens"),
        (tokens.light, "LightThemeTokens"),
        (tokens.dark, "DarkThemeTokens"),
    )
    for tree, class_name in csharp_targets:
        emitter = CSharpEmitter(
            class_name=class_name,
            namespace=config.namespace,
            scope=scope,
            generated_at=generated_at,
        )
        _save(result, out / "csharp" / f"{class_name}.cs", emitter.emit(tree))

    # Raw tokens
    _save(result, out / "tokens" / "index.json", json.dumps(document, indent=2, ensure_ascii=False))

    logger.info(f"Build complete: {len(result.files)} files written to {out}")
    return result


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point for ``tokenweave``."""
    parser = argparse.ArgumentParser(
        prog="tokenweave",
        description="Compile design tokens into CSS, Tailwind, TypeScript and C#.",
    )
    parser.add_argument("tokens", nargs="?", default="figma-tokens/$tokens.json",
                        help="Token document (JSON)")
    parser.add_argument("--out", default="dist", help="Output directory")
    parser.add_argument("--product", default="ivy-framework", help="Product scope to build")
    parser.add_argument("--scope-id", default=None,
                        help="Scope id placeholders must name (default: core.<product>)")
    parser.add_argument("--namespace", default="Ivy.Themes", help="C# namespace")
    parser.add_argument("--overlay", action="append", default=[],
                        help="Extra token document merged on top (repeatable)")
    parser.add_argument("--strict-aliases", action="store_true",
                        help="Drop flat CSS tokens without an alias")
    parser.add_argument("--validate", action="store_true",
                        help="Check the document structure before building")
    parser.add_argument("--no-version-check", action="store_true",
                        help="Skip npm/NuGet version synchronization check")
    parser.add_argument("--package-json", default="package.json")
    parser.add_argument("--csproj", default="Ivy.DesignSystem.csproj")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose)
    config = BuildConfig(
        tokens_path=args.tokens,
        overlays=args.overlay,
        product=args.product,
        scope_id=args.scope_id,
        output_dir=args.out,
        namespace=args.namespace,
        strict_aliases=args.strict_aliases,
        validate=args.validate,
        check_versions=not args.no_version_check,
        package_json_path=args.package_json,
        csproj_path=args.csproj,
    )
    try:
        build(config)
    except (TokenweaveError, OSError) as e:
        logger.error(f"Build failed: {e}")
        return 1
    return 0


def sync_version_main(argv: Optional[list[str]] = None) -> int:
    """Command-line entry point for ``tokenweave-sync-version``."""
    parser = argparse.ArgumentParser(
        prog="tokenweave-sync-version",
        description="Show or synchronize npm and NuGet package versions.",
    )
    parser.add_argument("version", nargs="?", help="New MAJOR.MINOR.PATCH version")
    parser.add_argument("--package-json", default="package.json")
    parser.add_argument("--csproj", default="Ivy.DesignSystem.csproj")
    args = parser.parse_args(argv)

    _configure_logging(False)
    try:
        if args.version is None:
            ensure_synchronized(args.package_json, args.csproj)
        else:
            status = sync_versions(args.version, args.package_json, args.csproj)
            logger.info(f"Version sync complete: {status.npm}")
    except TokenweaveError as e:
        logger.error(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
