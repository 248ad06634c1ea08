"""
Type Emitter - TypeScript declarations and a JavaScript token map.

Produces two files from the same ordered path list:

- ``index.d.ts``: a ``TokenName`` union plus ``tokens: Record<TokenName, string>``
- ``index.js``: the runtime ``tokens`` object mapping path -> ``var(--path)``
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..tree import TokenGroup, token_paths
from .base import write_output


def _quote(name: str) -> str:
    escaped = name.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


@dataclass(frozen=True)
class TypeOutput:
    """Generated declaration and runtime module sources."""
    declarations: str
    module: str
    token_names: tuple[str, ...]


@dataclass(frozen=True)
class TypeEmitter:
    """Emit token name types and the runtime token map."""
    title: str = "Ivy Design System"

    def token_names(self, tree: TokenGroup) -> list[str]:
        return token_paths(tree, qualify_theme=False)

    def token_map(self, tree: TokenGroup) -> dict[str, str]:
        return {name: f"var(--{name})" for name in self.token_names(tree)}

    def emit_declarations(self, names: list[str]) -> str:
        union = "".join(f"\n  | {_quote(name)}" for name in names) if names else " never"
        return f"""/**
 * Design token names from {self.title}
 * Autocomplete-friendly type for accessing design tokens
 */
export type TokenName ={union};

/**
 * All design tokens as a key-value map
 * Keys are token names, values are CSS variable references
 */
export const tokens: Record<TokenName, string>;

/**
 * Default export with all tokens
 */
export default tokens;
"""

    def emit_module(self, names: list[str]) -> str:
        tokens = json.dumps({name: f"var(--{name})" for name in names}, indent=2, ensure_ascii=False)
        return f"""/**
 * {self.title} - Design Tokens
 * Auto-generated token exports
 */
export const tokens = {tokens};

export default tokens;
"""

    def emit(self, tree: TokenGroup) -> TypeOutput:
        names = self.token_names(tree)
        return TypeOutput(
            declarations=self.emit_declarations(names),
            module=self.emit_module(names),
            token_names=tuple(names),
        )

    def save(self, tree: TokenGroup, output_dir: Union[str, Path]) -> list[Path]:
        """Write ``index.d.ts`` and ``index.js`` into ``output_dir``."""
        output = self.emit(tree)
        output_dir = Path(output_dir)
        return [
            write_output(output_dir / "index.js", output.module),
            write_output(output_dir / "index.d.ts", output.declarations),
        ]


def generate_types(tree: TokenGroup) -> TypeOutput:
    """Convenience wrapper around ``TypeEmitter.emit``."""
    return TypeEmitter().emit(tree)
