"""TF-IDF Built-in Documents - Container Backed Document Types.

Provides document implementations over the common container shapes, and
the adapter that lets scoring functions accept bare containers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import bisect
import logging
from collections.abc import Mapping
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union

from tfidf_core.document.base import (
    DocumentTier,
    ExpandableDocument,
    NaiveDocument,
    ProcessedDocument,
    supports,
    tier_of,
)

logger = logging.getLogger(__name__)

Pairs = Iterable[Tuple[Any, int]]


def _last_max(items: Iterable[Tuple[Any, int]]) -> Optional[Any]:
    """Return the term of the last entry holding the highest count."""
    best_term = None
    best_count = None
    for term, count in items:
        if best_count is None or count >= best_count:
            best_term = term
            best_count = count
    return best_term


class PairListDocument(ProcessedDocument, ExpandableDocument):
    """Document backed by an ordered sequence of (term, count) pairs.

    A list or tuple passed in is wrapped, not copied. Insertion order is
    kept and duplicate terms are allowed. With duplicates, only the first
    entry of a term counts, for both ``term_frequency`` and ``max``. Terms
    only need equality.
    """

    def __init__(self, pairs: Pairs = ()):
        if not isinstance(pairs, (list, tuple)):
            pairs = list(pairs)
        for pair in pairs:
            if not isinstance(pair, (tuple, list)) or len(pair) != 2:
                raise TypeError(f"Expected a (term, count) pair, got {pair!r}")
        self._pairs = pairs

    def term_frequency(self, term: Any) -> int:
        for entry, count in self._pairs:
            if entry == term:
                return count
        return 0

    def _first_entries(self) -> Iterator[Tuple[Any, int]]:
        seen: List[Any] = []
        for term, count in self._pairs:
            if term not in seen:
                seen.append(term)
                yield term, count

    def max(self) -> Optional[Any]:
        return _last_max(self._first_entries())

    def terms(self) -> Iterator[Any]:
        return (term for term, _ in self._pairs)

    def pairs(self) -> List[Tuple[Any, int]]:
        """Get a copy of the underlying pairs."""
        return [(term, count) for term, count in self._pairs]

    def __iter__(self) -> Iterator[Any]:
        return self.terms()

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"PairListDocument({self._pairs!r})"


class HashMapDocument(ProcessedDocument, ExpandableDocument):
    """Document backed by an unordered term -> count mapping.

    A mapping passed in is wrapped, not copied. Terms need equality and
    hashing.
    """

    def __init__(self, counts: Union[Mapping, Pairs, None] = None):
        if counts is None:
            counts = {}
        elif not isinstance(counts, Mapping):
            counts = dict(counts)
        self._counts: Mapping = counts

    def term_frequency(self, term: Any) -> int:
        return self._counts.get(term, 0)

    def max(self) -> Optional[Any]:
        return _last_max(self._counts.items())

    def terms(self) -> Iterator[Any]:
        return iter(self._counts)

    def __iter__(self) -> Iterator[Any]:
        return self.terms()

    def __len__(self) -> int:
        return len(self._counts)

    def __repr__(self) -> str:
        return f"HashMapDocument({dict(self._counts)!r})"


class SortedMapDocument(ProcessedDocument, ExpandableDocument):
    """Document backed by a term -> count mapping kept in sorted term order.

    Lookups bisect the sorted terms, so terms need a total ordering but no
    hashing. When built from pairs that repeat a term, the last count wins.
    """

    def __init__(self, counts: Union[Mapping, Pairs, None] = None):
        if counts is None:
            items: List[Tuple[Any, int]] = []
        elif isinstance(counts, Mapping):
            items = list(counts.items())
        else:
            items = [(term, count) for term, count in counts]

        self._terms: List[Any] = []
        self._counts: List[int] = []
        # sorted() is stable, so repeated terms stay in input order
        for term, count in sorted(items, key=lambda item: item[0]):
            if self._terms and self._terms[-1] == term:
                self._counts[-1] = count
            else:
                self._terms.append(term)
                self._counts.append(count)

    def _index(self, term: Any) -> int:
        i = bisect.bisect_left(self._terms, term)
        if i < len(self._terms) and self._terms[i] == term:
            return i
        return -1

    def term_frequency(self, term: Any) -> int:
        i = self._index(term)
        return self._counts[i] if i >= 0 else 0

    def max(self) -> Optional[Any]:
        return _last_max(zip(self._terms, self._counts))

    def terms(self) -> Iterator[Any]:
        return iter(self._terms)

    def items(self) -> List[Tuple[Any, int]]:
        """Get (term, count) pairs in sorted term order."""
        return list(zip(self._terms, self._counts))

    def __iter__(self) -> Iterator[Any]:
        return self.terms()

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"SortedMapDocument({self.items()!r})"


class TermSetDocument(NaiveDocument, ExpandableDocument):
    """Naive document backed by a set of terms, with no counts."""

    def __init__(self, terms: Iterable[Any] = ()):
        if not isinstance(terms, (set, frozenset)):
            terms = frozenset(terms)
        self._terms = terms

    def term_exists(self, term: Any) -> bool:
        return term in self._terms

    def terms(self) -> Iterator[Any]:
        return iter(self._terms)

    def __iter__(self) -> Iterator[Any]:
        return self.terms()

    def __len__(self) -> int:
        return len(self._terms)

    def __repr__(self) -> str:
        return f"TermSetDocument({set(self._terms)!r})"


def as_document(value: Any, requires: DocumentTier = DocumentTier.NAIVE) -> Any:
    """Adapt a value to a document satisfying the required tiers.

    Document objects pass through unchanged. Bare containers are wrapped:
    mappings become HashMapDocument, lists and tuples of (term, count)
    pairs become PairListDocument, sets become TermSetDocument.

    Args:
        value: Document object or container
        requires: Tiers the caller needs

    Returns:
        Document object

    Raises:
        TypeError: If the value cannot be adapted or lacks a required tier
    """
    if isinstance(value, (NaiveDocument, ExpandableDocument)):
        doc = value
    elif isinstance(value, Mapping):
        logger.debug(f"Adapting {type(value).__name__} to HashMapDocument")
        doc = HashMapDocument(value)
    elif isinstance(value, (set, frozenset)):
        logger.debug(f"Adapting {type(value).__name__} to TermSetDocument")
        doc = TermSetDocument(value)
    elif isinstance(value, (list, tuple)):
        logger.debug(f"Adapting {type(value).__name__} to PairListDocument")
        doc = PairListDocument(value)
    else:
        raise TypeError(f"Cannot use {type(value).__name__} as a document")

    if not supports(doc, requires):
        raise TypeError(
            f"{type(doc).__name__} is {tier_of(doc).describe()}, "
            f"but {requires.describe()} is required"
        )
    return doc


__all__ = [
    "PairListDocument",
    "HashMapDocument",
    "SortedMapDocument",
    "TermSetDocument",
    "as_document",
]
