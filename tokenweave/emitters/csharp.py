"""
C# Emitter - static classes of design token constants.

Generates a single source unit:

    namespace Ivy.Themes
    {
        public static class LightThemeTokens
        {
            public static class Color
            {
                /// <summary>color-primary</summary>
                public static readonly string Primary = "#00cc92";
            }

            public static string GenerateCSS(string selector = ":root") { ... }
            public static string? GetToken(string tokenName) { ... }
            public static string[] GetAllTokenNames() { ... }
            public static Dictionary<string, string> GetAllTokens() { ... }
        }
    }

``GetAllTokens`` is a literal table of derived path -> constant, and the other
helpers read from it, so lookups use the exact token names and work for any
number of constants, including zero. Two paths that produce the same C#
identifier within one category are rejected before anything is emitted.

Values are resolved against the optional source scope before emission, so
the generated constants hold concrete colors rather than placeholders.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from ..exceptions import DuplicatePropertyNameError
from ..references import SourceScope
from ..tree import TokenGroup, to_pascal_case
from .base import resolved_entries, write_output

logger = logging.getLogger(__name__)

DEFAULT_CLASS_NAME = "DesignSystemTokens"
DEFAULT_NAMESPACE = "Ivy.Themes"
DEFAULT_CATEGORY = "color"

_INVALID_IDENTIFIER_CHARS = re.compile(r"[^0-9A-Za-z_]")


def escape_string(value: str) -> str:
    """Escape a value for a C# regular string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def to_identifier(name: str) -> str:
    """PascalCase a kebab-case name into a valid C# identifier."""
    identifier = _INVALID_IDENTIFIER_CHARS.sub("_", to_pascal_case(name))
    if not identifier or identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def split_category(path: str) -> tuple[str, str]:
    """
    Split a derived path into (category, name-within-category).

    ``color-primary`` -> (``color``, ``primary``). Paths with a single
    segment belong to the default color category.
    """
    category, sep, rest = path.partition("-")
    if not sep:
        return DEFAULT_CATEGORY, path
    return category, rest


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


@dataclass(frozen=True)
class CSharpToken:
    """One constant to emit."""
    name: str
    value: str
    property_name: str


@dataclass
class CSharpEmitter:
    """
    Emit a static C# class for a token tree.

    Attributes:
        class_name: Name of the outer static class
        namespace: Enclosing namespace
        scope: Source scope for resolving placeholder values
        generated_at: Timestamp written into the remarks; now() when None
    """
    class_name: str = DEFAULT_CLASS_NAME
    namespace: str = DEFAULT_NAMESPACE
    scope: Optional[SourceScope] = None
    generated_at: Optional[datetime] = field(default=None)

    def extract(self, tree: TokenGroup) -> list[CSharpToken]:
        """Walk the tree and resolve every token value."""
        tokens = []
        for entry, value in resolved_entries(tree, self.scope):
            _, name = split_category(entry.path)
            tokens.append(CSharpToken(entry.path, value, to_identifier(name)))
        return tokens

    def group(self, tokens: list[CSharpToken]) -> dict[str, list[CSharpToken]]:
        """
        Group tokens by their leading path segment.

        Raises:
            DuplicatePropertyNameError: If two tokens share a property name
                within a category, or two categories share a class name.
        """
        groups: dict[str, list[CSharpToken]] = {}
        seen: dict[tuple[str, str], str] = {}
        for token in tokens:
            category, _ = split_category(token.name)
            key = (category, token.property_name)
            if key in seen:
                raise DuplicatePropertyNameError(category, token.property_name, seen[key], token.name)
            seen[key] = token.name
            groups.setdefault(category, []).append(token)

        classes: dict[str, str] = {}
        for category in groups:
            class_name = to_identifier(category)
            if class_name in classes:
                raise DuplicatePropertyNameError(self.class_name, class_name, classes[class_name], category)
            classes[class_name] = category
        return groups or {DEFAULT_CATEGORY: []}

    def _category_class(self, category: str, tokens: list[CSharpToken]) -> str:
        properties = "\n\n".join(
            f"            /// <summary>{token.name}</summary>\n"
            f'            public static readonly string {token.property_name} = "{escape_string(token.value)}";'
            for token in tokens
        )
        body = f"{properties}\n" if properties else ""
        return (
            "\n"
            "        /// <summary>\n"
            f"        /// Design tokens for {category}\n"
            "        /// </summary>\n"
            f"        public static class {to_identifier(category)}\n"
            "        {\n"
            f"{body}"
            "        }\n"
        )

    def emit(self, tree: TokenGroup) -> str:
        tokens = self.extract(tree)
        groups = self.group(tokens)

        nested_classes = "".join(
            self._category_class(category, category_tokens)
            for category, category_tokens in groups.items()
        )
        dict_entries = "".join(
            f'                {{ "{escape_string(token.name)}", '
            f"{to_identifier(category)}.{token.property_name} }},\n"
            for category, category_tokens in groups.items()
            for token in category_tokens
        )
        names = ",\n".join(f'                "{escape_string(token.name)}"' for token in tokens)
        names_block = f"{names}\n" if names else ""
        timestamp = format_timestamp(self.generated_at or datetime.now(timezone.utc))

        return f"""//------------------------------------------------------------------------------
// <auto-generated>
//     This code was generated by Ivy Design System build script.
//     Changes to this file may cause incorrect behavior and will be lost if
//     the code is regenerated.
// </auto-generated>
//------------------------------------------------------------------------------

#nullable enable

using System.Linq;

namespace {self.namespace}
{{
    /// <summary>
    /// Design System tokens generated from Ivy Design System
    /// Provides compile-time access to all design tokens
    /// </summary>
    /// <remarks>
    /// Generated on: {timestamp}
    /// Total tokens: {len(tokens)}
    /// </remarks>
    public static class {self.class_name}
    {{
{nested_classes}
        /// <summary>
        /// Generates CSS custom properties for all design tokens
        /// </summary>
        /// <param name="selector">CSS selector (default: ":root")</param>
        /// <returns>CSS string with all custom properties</returns>
        public static string GenerateCSS(string selector = ":root")
        {{
            var css = new System.Text.StringBuilder();
            css.AppendLine($"{{selector}} {{{{");
            foreach (var token in GetAllTokens())
            {{
                css.AppendLine($"  --{{token.Key}}: {{token.Value}};");
            }}
            css.AppendLine("}}");
            return css.ToString();
        }}

        /// <summary>
        /// Gets a token value by its CSS variable name
        /// </summary>
        /// <param name="tokenName">Token name in kebab-case (e.g., "color-primary")</param>
        /// <returns>Token value or null if not found</returns>
        public static string? GetToken(string tokenName)
        {{
            if (string.IsNullOrEmpty(tokenName)) return null;
            return GetAllTokens().TryGetValue(tokenName, out var value) ? value : null;
        }}

        /// <summary>
        /// Gets all token names
        /// </summary>
        /// <returns>Array of all token names in kebab-case</returns>
        public static string[] GetAllTokenNames()
        {{
            return new string[]
            {{
{names_block}            }};
        }}

        /// <summary>
        /// Gets all token values as a dictionary
        /// </summary>
        /// <returns>Dictionary of token name -> value</returns>
        public static System.Collections.Generic.Dictionary<string, string> GetAllTokens()
        {{
            return new System.Collections.Generic.Dictionary<string, string>
            {{
{dict_entries}            }};
        }}
    }}
}}
"""

    def save(self, tree: TokenGroup, path: Union[str, Path]) -> Path:
        written = write_output(path, self.emit(tree))
        tokens = self.extract(tree)
        categories = ", ".join(to_identifier(category) for category in self.group(tokens))
        logger.info(f"Generated {len(tokens)} C# token properties (categories: {categories})")
        return written


def generate_csharp(
    tree: TokenGroup,
    class_name: str = DEFAULT_CLASS_NAME,
    namespace: str = DEFAULT_NAMESPACE,
    scope: Optional[SourceScope] = None,
    generated_at: Optional[datetime] = None,
) -> str:
    """Convenience wrapper around ``CSharpEmitter.emit``."""
    return CSharpEmitter(
        class_name=class_name,
        namespace=namespace,
        scope=scope,
        generated_at=generated_at,
    ).emit(tree)
