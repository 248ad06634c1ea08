"""
Pytest fixtures for tokenweave tests.
"""

import json
import pytest
from pathlib import Path

from tokenweave.tree import parse_tree
from tokenweave.references import SourceScope


SCOPE_ID = "core.ivy-framework"


def ref(name: str, scope: str = SCOPE_ID) -> str:
    """Build a source color placeholder."""
    return f"{{{scope}.source.color.{name}}}"


@pytest.fixture
def source_doc() -> dict:
    """Raw source palette."""
    return {
        "color": {
            "primary": {"value": "#00cc92", "type": "color"},
            "black": {"value": "#000000", "type": "color"},
            "white": {"value": "#ffffff", "type": "color"},
            "secondary-light": {"value": "#dfe7e3", "type": "color"},
            "destructive": {"value": "#dd5860", "type": "color"},
        }
    }


@pytest.fixture
def light_doc() -> dict:
    """Raw light theme referencing the source palette."""
    return {
        "theme": {
            "light": {
                "color": {
                    "primary": {"value": ref("primary"), "type": "color"},
                    "primary-foreground": {"value": ref("black"), "type": "color"},
                    "background": {"value": ref("white"), "type": "color"},
                    "secondary": {"value": ref("secondary-light"), "type": "color"},
                }
            }
        }
    }


@pytest.fixture
def dark_doc() -> dict:
    """Raw dark theme referencing the source palette."""
    return {
        "theme": {
            "dark": {
                "color": {
                    "primary": {"value": ref("primary"), "type": "color"},
                    "background": {"value": ref("black"), "type": "color"},
                    "foreground": {"value": ref("white"), "type": "color"},
                }
            }
        }
    }


@pytest.fixture
def source_tree(source_doc):
    return parse_tree(source_doc)


@pytest.fixture
def light_tree(light_doc):
    return parse_tree(light_doc)


@pytest.fixture
def dark_tree(dark_doc):
    return parse_tree(dark_doc)


@pytest.fixture
def scope(source_tree) -> SourceScope:
    return SourceScope(SCOPE_ID, source_tree)


@pytest.fixture
def layered_document(source_doc, light_doc, dark_doc) -> dict:
    """Full document in the core.<product> layout."""
    return {
        "core": {
            "ivy-framework": {
                "source": source_doc,
                "theme": {
                    "light": light_doc["theme"]["light"],
                    "dark": {
                        "color": {
                            **dark_doc["theme"]["dark"]["color"],
                            "primary-foreground": {"value": ref("white"), "type": "color"},
                            "secondary": {"value": ref("destructive"), "type": "color"},
                        }
                    },
                },
            }
        }
    }


@pytest.fixture
def scales_doc() -> dict:
    """Source with typography, spacing and other Tailwind categories."""
    return {
        "color": {
            "primary": {"value": "#00cc92", "type": "color"},
        },
        "typography": {
            "fontFamily": {"sans": {"value": "Inter, sans-serif", "type": "fontFamily"}},
            "fontSize": {"sm": {"value": "0.875rem", "type": "dimension"}},
            "lineHeight": {"tight": {"value": 1.25, "type": "number"}},
            "letterSpacing": {"normal": {"value": "0em", "type": "dimension"}},
            "tracking": {"wide": {"value": "0.025em", "type": "dimension"}},
        },
        "spacing": {"4": {"value": "1rem", "type": "dimension"}},
        "radius": {"md": {"value": "0.375rem", "type": "dimension"}},
        "shadow": {"sm": {"value": "0 1px 2px rgba(0, 0, 0, 0.05)", "type": "shadow"}},
        "breakpoint": {"md": {"value": "768px", "type": "dimension"}},
        "animation": {
            "duration": {"fast": {"value": "150ms", "type": "duration"}},
            "easing": {"out": {"value": "cubic-bezier(0, 0, 0.2, 1)", "type": "cubicBezier"}},
        },
    }


@pytest.fixture
def write_json(tmp_path: Path):
    """Write a JSON document under tmp_path and return its path."""
    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
