"""Key resolver: walk a translation tree along a dot-separated key path."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from i18nkit.store import TranslationTree


def split_key_path(key_path: str) -> list[str]:
    """Split *key_path* on ``.`` with no escaping.  ``""`` yields ``[]``."""
    if not key_path:
        return []
    return key_path.split(".")


def resolve(tree: TranslationTree, key_path: str) -> str | None:
    """Return the leaf string at *key_path*, or ``None`` if there is none.

    Resolution never matches partially: a missing segment, a leaf reached
    with segments still left, or a path ending on a subtree all give
    ``None``.  The empty path never resolves to the tree root.
    """
    segments = split_key_path(key_path)
    if not segments:
        return None

    node: str | TranslationTree = tree
    for segment in segments:
        if not isinstance(node, Mapping):
            return None
        if segment not in node:
            return None
        node = node[segment]

    return node if isinstance(node, str) else None


def iter_leaves(tree: TranslationTree, prefix: str = "") -> Iterator[tuple[str, str]]:
    """Yield ``(key_path, value)`` for every leaf in *tree*, depth first."""
    for key, value in tree.items():
        path = f"{prefix}.{key}" if prefix else key
        if isinstance(value, str):
            yield path, value
        else:
            yield from iter_leaves(value, path)
