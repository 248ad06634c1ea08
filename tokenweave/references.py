"""
Reference Resolver - resolve ``{<scope>.source.color.<name>}`` placeholders.

Theme tokens point back at a product's source palette with placeholder
values such as ``{core.ivy-framework.source.color.primary}``. The resolver
replaces them with the concrete value from a caller-supplied SourceScope.

Rules:
- No scope supplied: value returned unchanged
- Not a placeholder: value returned unchanged
- Placeholder names a different scope than the one supplied: error
- Lookup miss: placeholder returned unchanged (visible in the output)
- Resolution is one level deep; a source token that is itself a
  placeholder is returned as written

Usage:
    scope = SourceScope("core.ivy-framework", source_tree)
    resolve_reference("{core.ivy-framework.source.color.primary}", scope)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .exceptions import ReferenceScopeMismatchError
from .tree import COLOR_KEY, Token, TokenGroup, parse_tree

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(
    r"\{(?P<scope>[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*)\.source\.color\.(?P<name>[\w-]+)\}"
)

# Accepts any scope id; only created explicitly via SourceScope.wildcard()
WILDCARD_SCOPE = "*"


@dataclass(frozen=True)
class Reference:
    """A parsed placeholder."""
    raw: str
    scope_id: str
    name: str


def parse_reference(value: str) -> Optional[Reference]:
    """Parse a placeholder string, or return None for literals."""
    if not isinstance(value, str):
        return None
    match = REFERENCE_PATTERN.fullmatch(value)
    if match is None:
        return None
    return Reference(raw=value, scope_id=match.group("scope"), name=match.group("name"))


def is_reference(value: str) -> bool:
    """Check whether a value has placeholder shape."""
    return parse_reference(value) is not None


@dataclass(frozen=True)
class SourceScope:
    """
    The scope placeholders are resolved against.

    Attributes:
        scope_id: Identifier placeholders must name (e.g. ``core.ivy-framework``)
        tokens: The source tree; its ``color`` group is searched when present,
            otherwise the tree itself is treated as the color map
    """
    scope_id: str
    tokens: TokenGroup

    def __post_init__(self):
        if not isinstance(self.tokens, TokenGroup):
            object.__setattr__(self, "tokens", parse_tree(self.tokens))

    @classmethod
    def wildcard(cls, tokens: Union[TokenGroup, Mapping[str, Any]]) -> "SourceScope":
        """Scope that accepts placeholders naming any scope id."""
        return cls(WILDCARD_SCOPE, tokens)

    @property
    def colors(self) -> TokenGroup:
        return self.tokens.group(COLOR_KEY) or self.tokens

    def accepts(self, scope_id: str) -> bool:
        return self.scope_id == WILDCARD_SCOPE or self.scope_id == scope_id

    def lookup(self, name: str) -> Optional[str]:
        """Value of source color ``name``, or None on a miss."""
        node = self.colors.children.get(name)
        if isinstance(node, Token):
            return node.value
        if isinstance(node, str):
            return node
        return None


def resolve_reference(value: str, scope: Optional[SourceScope] = None) -> str:
    """
    Resolve a single placeholder value against ``scope``.

    Args:
        value: Raw token value (literal or placeholder)
        scope: Source scope to search; None disables resolution

    Returns:
        The resolved value, or ``value`` unchanged when it is a literal or the
        lookup misses

    Raises:
        ReferenceScopeMismatchError: If the placeholder names another scope.
    """
    if scope is None:
        return value
    reference = parse_reference(value)
    if reference is None:
        return value
    if not scope.accepts(reference.scope_id):
        raise ReferenceScopeMismatchError(value, scope.scope_id, reference.scope_id)

    resolved = scope.lookup(reference.name)
    if resolved is None:
        logger.debug(f"Unresolved reference {value} in scope {scope.scope_id}")
        return value
    return resolved
