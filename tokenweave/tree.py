"""
Token Tree - the shared in-memory model every emitter walks.

A token document is parsed once into a tree of two node kinds:

- ``Token``: a leaf carrying a ``value`` and a ``type``
- ``TokenGroup``: an ordered mapping of keys to tokens, groups, or raw scalars

Leaf detection happens in ``parse_tree`` only. Traversal never re-inspects
mappings for ``value``/``type`` keys.

Path derivation:
    Token paths are ancestor keys joined by ``-``. Two keys are special:

    - ``theme``: ``theme.<variant>.color`` is unwrapped and contributes
      ``theme-<variant>-color`` (qualified) or ``color`` (collapsed)
    - ``color``: visited before the other children of its group

Usage:
    from tokenweave.tree import parse_tree, walk_tokens

    tree = parse_tree({"color": {"primary": {"value": "#00cc92", "type": "color"}}})
    for entry in walk_tokens(tree):
        print(entry.path, entry.value)   # color-primary #00cc92
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Optional, Union

from .exceptions import DuplicateTokenPathError, InvalidTokenDocumentError

logger = logging.getLogger(__name__)

THEME_KEY = "theme"
COLOR_KEY = "color"

# Keys a token mapping may carry besides value/type that we keep on the model
_KNOWN_TOKEN_KEYS = ("value", "type", "description")


def _format_scalar(value: Union[str, int, float]) -> str:
    """Render a numeric token value the way JSON would print it."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# =============================================================================
# Nodes
# =============================================================================

@dataclass
class Token:
    """A leaf design value with a value and a type tag."""
    value: str
    type: str
    description: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def is_token_mapping(data: Any) -> bool:
        """Check whether a raw JSON mapping describes a leaf token."""
        if not isinstance(data, Mapping):
            return False
        if "value" not in data or "type" not in data:
            return False
        value = data["value"]
        return (
            isinstance(data["type"], str)
            and isinstance(value, (str, int, float))
            and not isinstance(value, bool)
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Token":
        """Build a token from its raw mapping."""
        description = data.get("description")
        return cls(
            value=_format_scalar(data["value"]),
            type=data["type"],
            description=description if isinstance(description, str) else None,
            extra={k: v for k, v in data.items() if k not in _KNOWN_TOKEN_KEYS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the raw mapping shape."""
        result: dict[str, Any] = {"value": self.value, "type": self.type}
        if self.description is not None:
            result["description"] = self.description
        result.update(self.extra)
        return result


# Raw JSON values that are neither tokens nor groups (kept, never emitted)
Scalar = Union[str, int, float, bool, None, list]
TokenNode = Union[Token, "TokenGroup", Scalar]


class TokenGroup:
    """
    Ordered mapping of keys to tokens, nested groups, or raw scalars.

    Example:
        group = TokenGroup()
        group.add("primary", Token("#00cc92", "color"))
        group.get("primary").value   # "#00cc92"
    """

    def __init__(self, children: Optional[Mapping[str, TokenNode]] = None):
        self.children: dict[str, TokenNode] = dict(children or {})

    def add(self, key: str, node: TokenNode) -> "TokenGroup":
        """Add or replace a child node."""
        self.children[key] = node
        return self

    def get(self, path: str) -> Optional[TokenNode]:
        """Look up a node by dotted path (e.g. ``theme.dark.color``)."""
        node: TokenNode = self
        for part in path.split("."):
            if not isinstance(node, TokenGroup) or part not in node.children:
                return None
            node = node.children[part]
        return node

    def group(self, key: str) -> Optional["TokenGroup"]:
        """Return the child under ``key`` when it is a group."""
        child = self.children.get(key)
        return child if isinstance(child, TokenGroup) else None

    def keys(self):
        return self.children.keys()

    def items(self):
        return self.children.items()

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __getitem__(self, key: str) -> TokenNode:
        return self.children[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TokenGroup):
            return NotImplemented
        return self.children == other.children

    def __repr__(self) -> str:
        return f"TokenGroup({list(self.children)})"

    def flatten(self, prefix: str = "") -> dict[str, Token]:
        """
        Flatten to a dict of dotted path -> Token.

        Unlike ``walk_tokens`` this applies no theme/color unwrapping.
        """
        result: dict[str, Token] = {}
        for key, child in self.children.items():
            path = f"{prefix}.{key}" if prefix else key
            if isinstance(child, Token):
                result[path] = child
            elif isinstance(child, TokenGroup):
                result.update(child.flatten(path))
        return result

    def to_dict(self) -> dict[str, Any]:
        """Serialize the group back into a plain JSON-compatible dict."""
        result: dict[str, Any] = {}
        for key, child in self.children.items():
            if isinstance(child, (Token, TokenGroup)):
                result[key] = child.to_dict()
            elif isinstance(child, list):
                result[key] = list(child)
            else:
                result[key] = child
        return result

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TokenGroup":
        """Parse a raw mapping into a group (see ``parse_tree``)."""
        group = cls()
        for key, value in data.items():
            if Token.is_token_mapping(value):
                group.children[key] = Token.from_dict(value)
            elif isinstance(value, Mapping):
                group.children[key] = cls.from_dict(value)
            else:
                group.children[key] = value
        return group


def parse_tree(data: Union[Mapping[str, Any], TokenGroup]) -> TokenGroup:
    """
    Parse a raw token document into a TokenGroup.

    Mappings with both ``value`` and ``type`` become Tokens; any other
    mapping becomes a group. Mappings missing one of the two keys are
    treated as groups and traversal simply descends into them.

    Raises:
        InvalidTokenDocumentError: If ``data`` is not a mapping.
    """
    if isinstance(data, TokenGroup):
        return data
    if not isinstance(data, Mapping):
        raise InvalidTokenDocumentError(
            f"expected a JSON object, got {type(data).__name__}"
        )
    return TokenGroup.from_dict(data)


# =============================================================================
# Naming
# =============================================================================

def join_path(prefix: str, key: str) -> str:
    """Append a key to a hyphen-joined path."""
    return f"{prefix}-{key}" if prefix else key


def to_pascal_case(name: str) -> str:
    """
    Convert a kebab-case token name to a PascalCase identifier.

    Examples:
        color-brand-primary -> ColorBrandPrimary
        primary-foreground  -> PrimaryForeground
    """
    return "".join(word[:1].upper() + word[1:] for word in name.split("-") if word)


_KEBAB_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_kebab_case(identifier: str) -> str:
    """Insert a hyphen before each internal capital and lowercase."""
    return _KEBAB_BOUNDARY.sub("-", identifier).lower()


# =============================================================================
# Traversal
# =============================================================================

@dataclass(frozen=True)
class TokenEntry:
    """A token reached by traversal together with its derived path."""
    path: str
    key: str
    token: Token

    @property
    def value(self) -> str:
        return self.token.value

    @property
    def type(self) -> str:
        return self.token.type

    @property
    def property_name(self) -> str:
        """Path as a capitalized-word identifier."""
        return to_pascal_case(self.path)


def unwrap_theme(theme: TokenGroup) -> tuple[Optional[str], Optional[TokenGroup]]:
    """
    Pick the variant of a ``theme`` wrapper and return its color group.

    Only the first variant key is used. Trees are expected to carry a single
    variant; when more are present the rest are skipped with a warning.

    Returns:
        (variant name, ``theme.<variant>.color`` group), either may be None
    """
    variants = list(theme.keys())
    if not variants:
        return None, None
    if len(variants) > 1:
        logger.warning(
            f"Theme wrapper has {len(variants)} variants {variants}; "
            f"only '{variants[0]}' is traversed"
        )
    variant = variants[0]
    body = theme.group(variant)
    if body is None:
        return variant, None
    return variant, body.group(COLOR_KEY)


def _walk(group: TokenGroup, prefix: str, qualify_theme: bool) -> Iterator[TokenEntry]:
    theme = group.group(THEME_KEY)
    if theme is not None:
        variant, colors = unwrap_theme(theme)
        if colors is not None:
            segment = f"theme-{variant}-color" if qualify_theme else COLOR_KEY
            yield from _walk(colors, join_path(prefix, segment), qualify_theme)

    colors = group.group(COLOR_KEY)
    if colors is not None:
        yield from _walk(colors, join_path(prefix, COLOR_KEY), qualify_theme)

    for key, child in group.items():
        if key == THEME_KEY:
            continue
        if isinstance(child, Token):
            yield TokenEntry(path=join_path(prefix, key), key=key, token=child)
        elif isinstance(child, TokenGroup) and child is not colors:
            yield from _walk(child, join_path(prefix, key), qualify_theme)


def walk_tokens(
    group: TokenGroup,
    prefix: str = "",
    qualify_theme: bool = True,
) -> list[TokenEntry]:
    """
    Collect every reachable token with its derived path, in traversal order.

    Args:
        group: Tree (or subtree) to walk
        prefix: Path prefix for the tokens found
        qualify_theme: Name theme tokens ``theme-<variant>-color-*`` when True,
            ``color-*`` when False

    Returns:
        Ordered list of TokenEntry

    Raises:
        DuplicateTokenPathError: If two tokens derive the same path.
    """
    entries: list[TokenEntry] = []
    seen: set[str] = set()
    for entry in _walk(group, prefix, qualify_theme):
        if entry.path in seen:
            raise DuplicateTokenPathError(entry.path)
        seen.add(entry.path)
        entries.append(entry)
    return entries


def token_paths(group: TokenGroup, qualify_theme: bool = True) -> list[str]:
    """Derived paths of every token, in traversal order."""
    return [entry.path for entry in walk_tokens(group, qualify_theme=qualify_theme)]


def theme_variant(group: TokenGroup) -> Optional[str]:
    """Name of the theme variant a tree carries, if any."""
    theme = group.group(THEME_KEY)
    if theme is None:
        return None
    variant, _ = unwrap_theme(theme)
    return variant
