"""Shortest unique prefixes for task ids, and resolving a prefix back to an id.

Both directions work from the live id set on every call; nothing here is
cached between calls.

Forward (unique_prefixes): every id maps to the shortest leading substring
no other id shares. When one id is itself a leading substring of another,
no truncation can tell them apart, so both map to their full ids.

Reverse (resolve): a reference picks the single id starting with it. When
several ids match, an exact match on a full id still wins.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Tuple, Union

from .errors import AmbiguousReference, UnknownReference

logger = logging.getLogger(__name__)

Resolution = Union[str, UnknownReference, AmbiguousReference]


class _Node:
    __slots__ = ('children', 'count', 'terminal')

    def __init__(self) -> None:
        self.children: Dict[str, _Node] = {}
        self.count = 0  # ids passing through this node
        self.terminal = False  # an id ends here


def _build_trie(ids: Iterable[str]) -> Tuple[_Node, List[str]]:
    root = _Node()
    inserted: List[str] = []
    for tid in ids:
        if not tid:
            raise ValueError('empty task id')
        node = root
        for ch in tid:
            node = node.children.setdefault(ch, _Node())
            node.count += 1
        if node.terminal:
            raise ValueError(f'duplicate task id: {tid}')
        node.terminal = True
        inserted.append(tid)
    return root, inserted


def _shortest_prefix(root: _Node, tid: str) -> str:
    node = root
    last = len(tid) - 1
    for i, ch in enumerate(tid):
        node = node.children[ch]
        if node.terminal and i < last:
            # a shorter id is a leading substring of this one
            return tid
        if node.count == 1:
            return tid[:i + 1]
    # this id is a leading substring of a longer one
    return tid


def unique_prefixes(ids: Iterable[str]) -> Dict[str, str]:
    """Return a mapping of each id to its shortest unique prefix.

    Runs in time linear in the total number of characters. The result only
    depends on the set of ids, not on the order they are supplied in.

    Raises ValueError for an empty or duplicated id; ids come from a mapping
    keyed by id, so either means the caller's state is corrupt.
    """
    root, inserted = _build_trie(ids)
    return {tid: _shortest_prefix(root, tid) for tid in inserted}


def resolve(ref: str, ids: Iterable[str]) -> Resolution:
    """Return the single id ``ref`` refers to, or the failure explaining why not.

    If more than one id starts with ``ref`` but one of them is exactly
    ``ref``, that id is returned.
    """
    candidates = list(ids)
    matched = [tid for tid in candidates if tid.startswith(ref)]
    if len(matched) == 1:
        return matched[0]
    if not matched:
        logger.debug('no task id starts with %r', ref)
        return UnknownReference(ref)
    if ref in matched:
        return ref
    logger.debug('%d task ids start with %r', len(matched), ref)
    return AmbiguousReference(ref)
