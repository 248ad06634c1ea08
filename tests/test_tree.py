"""
Tests for the token tree model (tree.py).

Tests:
- Token leaf detection and serialization
- TokenGroup access, flattening and round-tripping
- Path derivation with theme/color unwrapping
- Naming helpers
"""

import logging
import pytest

from tokenweave.exceptions import DuplicateTokenPathError, InvalidTokenDocumentError
from tokenweave.tree import (
    Token,
    TokenEntry,
    TokenGroup,
    join_path,
    parse_tree,
    theme_variant,
    to_kebab_case,
    to_pascal_case,
    token_paths,
    unwrap_theme,
    walk_tokens,
)


# =============================================================================
# Token Tests
# =============================================================================

class TestToken:
    """Tests for Token leaf detection and conversion."""

    def test_is_token_mapping(self):
        """Test mappings with value and type are tokens."""
        assert Token.is_token_mapping({"value": "#fff", "type": "color"})

    def test_missing_type_is_not_token(self):
        """Test mapping without type is not a token."""
        assert not Token.is_token_mapping({"value": "#fff"})

    def test_missing_value_is_not_token(self):
        """Test mapping without value is not a token."""
        assert not Token.is_token_mapping({"type": "color"})

    def test_nested_value_is_not_token(self):
        """Test mapping whose value is an object is not a token."""
        assert not Token.is_token_mapping({"value": {"a": 1}, "type": "color"})

    def test_boolean_value_is_not_token(self):
        """Test boolean values are not accepted as token values."""
        assert not Token.is_token_mapping({"value": True, "type": "boolean"})

    def test_numeric_value_stored_as_string(self):
        """Test numbers are rendered the way JSON prints them."""
        assert Token.from_dict({"value": 700, "type": "fontWeight"}).value == "700"
        assert Token.from_dict({"value": 1.5, "type": "number"}).value == "1.5"
        assert Token.from_dict({"value": 2.0, "type": "number"}).value == "2"

    def test_extra_keys_preserved(self):
        """Test description and unknown keys survive a round trip."""
        raw = {"value": "#fff", "type": "color", "description": "White", "$extensions": {"x": 1}}
        token = Token.from_dict(raw)
        assert token.description == "White"
        assert token.to_dict() == raw


# =============================================================================
# TokenGroup Tests
# =============================================================================

class TestTokenGroup:
    """Tests for TokenGroup access helpers."""

    def test_parse_builds_variants(self, source_doc):
        """Test parse_tree decides leaf vs group once."""
        tree = parse_tree(source_doc)
        assert isinstance(tree["color"], TokenGroup)
        assert isinstance(tree["color"]["primary"], Token)

    def test_parse_rejects_non_mapping(self):
        """Test parse_tree refuses non-object documents."""
        with pytest.raises(InvalidTokenDocumentError):
            parse_tree(["not", "an", "object"])

    def test_parse_returns_existing_group(self, source_tree):
        """Test parse_tree passes TokenGroups through."""
        assert parse_tree(source_tree) is source_tree

    def test_get_dotted_path(self, light_tree):
        """Test get with a nested dotted path."""
        token = light_tree.get("theme.light.color.primary")
        assert isinstance(token, Token)

    def test_get_missing(self, source_tree):
        """Test get with non-existent paths."""
        assert source_tree.get("nope") is None
        assert source_tree.get("color.primary.value") is None

    def test_group_helper(self, source_tree):
        """Test group returns only groups."""
        assert source_tree.group("color") is not None
        assert source_tree["color"].group("primary") is None

    def test_add_chains(self):
        """Test add returns the group."""
        group = TokenGroup().add("a", Token("1px", "dimension")).add("b", Token("2px", "dimension"))
        assert list(group) == ["a", "b"]
        assert len(group) == 2
        assert "a" in group

    def test_flatten(self, source_tree):
        """Test flatten produces dotted paths without unwrapping."""
        flat = source_tree.flatten()
        assert "color.primary" in flat
        assert flat["color.primary"].value == "#00cc92"

    def test_flatten_with_prefix(self):
        """Test flatten with a prefix."""
        group = TokenGroup({"primary": Token("#f00", "color")})
        assert "theme.primary" in group.flatten(prefix="theme")

    def test_to_dict_round_trip(self, light_doc):
        """Test to_dict reproduces the raw document."""
        assert parse_tree(light_doc).to_dict() == light_doc

    def test_scalars_kept_but_not_tokens(self):
        """Test raw scalar children survive but are not walked."""
        tree = parse_tree({"color": {"primary": {"value": "#fff", "type": "color"}, "note": "raw"}})
        assert tree["color"]["note"] == "raw"
        assert token_paths(tree) == ["color-primary"]

    def test_equality(self, source_doc):
        """Test groups compare by content."""
        assert parse_tree(source_doc) == parse_tree(source_doc)


# =============================================================================
# Traversal Tests
# =============================================================================

class TestWalkTokens:
    """Tests for path derivation."""

    def test_color_prefix(self, source_tree):
        """Test direct color structure gets the color prefix."""
        assert token_paths(source_tree) == [
            "color-primary",
            "color-black",
            "color-white",
            "color-secondary-light",
            "color-destructive",
        ]

    def test_theme_qualified(self, dark_tree):
        """Test theme trees derive theme-<variant>-color paths by default."""
        assert token_paths(dark_tree) == [
            "theme-dark-color-primary",
            "theme-dark-color-background",
            "theme-dark-color-foreground",
        ]

    def test_theme_collapsed(self, light_tree):
        """Test collapsed theme naming yields color- paths."""
        paths = token_paths(light_tree, qualify_theme=False)
        assert paths[0] == "color-primary"
        assert all(p.startswith("color-") for p in paths)

    def test_theme_with_prefix(self, dark_tree):
        """Test theme segment is suffixed onto an existing prefix."""
        entries = walk_tokens(dark_tree, prefix="ivy")
        assert entries[0].path == "ivy-theme-dark-color-primary"

    def test_nested_groups(self):
        """Test nested groups extend the path."""
        tree = parse_tree({"color": {"brand": {"primary": {"value": "#fff", "type": "color"}}}})
        assert token_paths(tree) == ["color-brand-primary"]

    def test_color_does_not_hide_siblings(self, scales_doc):
        """Test categories next to color are still walked."""
        paths = token_paths(parse_tree(scales_doc))
        assert paths[0] == "color-primary"
        assert "spacing-4" in paths
        assert "typography-fontSize-sm" in paths
        assert "animation-easing-out" in paths

    def test_theme_key_skipped_elsewhere(self):
        """Test a theme wrapper without colors contributes nothing."""
        tree = parse_tree({"theme": {"light": {"spacing": {"sm": {"value": "4px", "type": "dimension"}}}}})
        assert token_paths(tree) == []

    def test_malformed_token_descended(self):
        """Test a mapping missing type is descended, not emitted."""
        tree = parse_tree({"color": {"broken": {"value": "#fff"}, "ok": {"value": "#000", "type": "color"}}})
        assert token_paths(tree) == ["color-ok"]

    def test_empty_group(self):
        """Test empty groups produce no tokens."""
        assert walk_tokens(TokenGroup()) == []
        assert token_paths(parse_tree({"color": {}})) == []

    def test_deterministic(self, layered_document):
        """Test identical input always yields identical path order."""
        first = token_paths(parse_tree(layered_document))
        second = token_paths(parse_tree(layered_document))
        assert first == second

    def test_duplicate_paths_rejected(self):
        """Test two tokens deriving the same path raise."""
        tree = parse_tree({
            "color": {"a-b": {"value": "#fff", "type": "color"}, "a": {"b": {"value": "#000", "type": "color"}}}
        })
        with pytest.raises(DuplicateTokenPathError) as exc_info:
            walk_tokens(tree)
        assert exc_info.value.path == "color-a-b"

    def test_entry_properties(self, source_tree):
        """Test TokenEntry exposes value, type and property name."""
        entry = walk_tokens(source_tree)[3]
        assert isinstance(entry, TokenEntry)
        assert entry.key == "secondary-light"
        assert entry.value == "#dfe7e3"
        assert entry.type == "color"
        assert entry.property_name == "ColorSecondaryLight"


class TestThemeUnwrapping:
    """Tests for theme variant selection."""

    def test_unwrap(self, dark_tree):
        """Test unwrap returns the variant and its colors."""
        variant, colors = unwrap_theme(dark_tree["theme"])
        assert variant == "dark"
        assert "primary" in colors

    def test_unwrap_empty(self):
        """Test unwrap on an empty wrapper."""
        assert unwrap_theme(TokenGroup()) == (None, None)

    def test_multiple_variants_warns(self, caplog):
        """Test only the first variant is used and a warning is logged."""
        tree = parse_tree({
            "theme": {
                "light": {"color": {"a": {"value": "#fff", "type": "color"}}},
                "dark": {"color": {"a": {"value": "#000", "type": "color"}}},
            }
        })
        with caplog.at_level(logging.WARNING, logger="tokenweave.tree"):
            paths = token_paths(tree)
        assert paths == ["theme-light-color-a"]
        assert "only 'light' is traversed" in caplog.text

    def test_theme_variant(self, light_tree, source_tree):
        """Test theme_variant helper."""
        assert theme_variant(light_tree) == "light"
        assert theme_variant(source_tree) is None


# =============================================================================
# Naming Tests
# =============================================================================

class TestNaming:
    """Tests for naming helpers."""

    def test_join_path(self):
        assert join_path("", "color") == "color"
        assert join_path("color", "primary") == "color-primary"

    def test_pascal_case(self):
        assert to_pascal_case("color-brand-primary") == "ColorBrandPrimary"
        assert to_pascal_case("primary-foreground") == "PrimaryForeground"
        assert to_pascal_case("fontSize") == "FontSize"

    def test_kebab_case(self):
        assert to_kebab_case("PrimaryForeground") == "primary-foreground"
        assert to_kebab_case("Primary") == "primary"
