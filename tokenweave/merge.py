"""
Tree Merger - deep-merge layered token documents.

Layers are merged key by key: nested mappings present on both sides are
merged recursively, anything else is overwritten by the later layer. A
product layer can therefore override a single token without discarding
the sibling tokens defined by the core layer.
"""

from __future__ import annotations

import copy
from typing import Any, Mapping, MutableMapping, Union

from .tree import TokenGroup, parse_tree

Layer = Union[Mapping[str, Any], TokenGroup]


def deep_merge(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """
    Merge ``source`` into ``target`` in place and return ``target``.

    Example:
        deep_merge({"a": {"x": 1}}, {"a": {"y": 2}})   # {"a": {"x": 1, "y": 2}}
    """
    for key, value in source.items():
        existing = target.get(key)
        if isinstance(value, Mapping) and isinstance(existing, MutableMapping):
            target[key] = deep_merge(existing, value)
        else:
            target[key] = copy.deepcopy(value)
    return target


def _as_document(layer: Layer) -> Mapping[str, Any]:
    if isinstance(layer, TokenGroup):
        return layer.to_dict()
    return layer


def merge_documents(*layers: Layer) -> dict[str, Any]:
    """Merge layers left to right into a fresh raw document."""
    merged: dict[str, Any] = {}
    for layer in layers:
        deep_merge(merged, _as_document(layer))
    return merged


def merge_trees(*layers: Layer) -> TokenGroup:
    """
    Merge layers left to right and parse the result.

    Later layers win on conflicts. Inputs are not modified.
    """
    return parse_tree(merge_documents(*layers))
