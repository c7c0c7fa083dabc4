"""TF-IDF Document Base - Document Capability Contracts.

A document is a value carrying knowledge about a multiset of terms. The
knowledge comes in three tiers:

    NaiveDocument      - knows whether a term occurs
    ProcessedDocument  - knows how many times a term occurs, and which term
                         occurs most often
    ExpandableDocument - can enumerate every distinct term it holds

Every ProcessedDocument is also a NaiveDocument: ``term_exists(t)`` is
defined once, as ``term_frequency(t) > 0``, and may not be overridden.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Flag, auto
from typing import Any, Iterator, Optional


class DocumentTier(Flag):
    """Capability tiers a document value may satisfy."""

    NONE = 0
    NAIVE = auto()
    PROCESSED = auto()
    EXPANDABLE = auto()

    def describe(self) -> str:
        """Human readable list of the tiers in this set."""
        tiers = (DocumentTier.NAIVE, DocumentTier.PROCESSED, DocumentTier.EXPANDABLE)
        names = [tier.name.lower() for tier in tiers if tier in self]
        return " + ".join(names) if names else "none"


class NaiveDocument(ABC):
    """A document that only knows whether a term is contained in it."""

    @abstractmethod
    def term_exists(self, term: Any) -> bool:
        """Return True if the (non-normalized) term occurs in the document."""
        pass


class ProcessedDocument(NaiveDocument):
    """A document where the frequency of each term is already known."""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "term_exists" in cls.__dict__:
            raise TypeError(
                f"{cls.__name__} may not override term_exists; "
                "it is derived from term_frequency"
            )

    @abstractmethod
    def term_frequency(self, term: Any) -> int:
        """Return how many times the term occurs. Absent terms count 0."""
        pass

    @abstractmethod
    def max(self) -> Optional[Any]:
        """Return the term with the highest count, or None if empty."""
        pass

    def term_exists(self, term: Any) -> bool:
        return self.term_frequency(term) > 0


class ExpandableDocument(ABC):
    """A document that can enumerate the terms it contains.

    ``terms()`` visits every distinct term at least once. Duplicates are
    permitted and the order is unspecified.
    """

    @abstractmethod
    def terms(self) -> Iterator[Any]:
        """Iterate over the terms in the document."""
        pass


def tier_of(doc: Any) -> DocumentTier:
    """Get the capability tiers satisfied by a document object."""
    tiers = DocumentTier.NONE
    if isinstance(doc, NaiveDocument):
        tiers |= DocumentTier.NAIVE
    if isinstance(doc, ProcessedDocument):
        tiers |= DocumentTier.PROCESSED
    if isinstance(doc, ExpandableDocument):
        tiers |= DocumentTier.EXPANDABLE
    return tiers


def supports(doc: Any, requires: DocumentTier) -> bool:
    """Check whether a document satisfies every tier in ``requires``."""
    return (tier_of(doc) & requires) == requires


__all__ = [
    "DocumentTier",
    "NaiveDocument",
    "ProcessedDocument",
    "ExpandableDocument",
    "tier_of",
    "supports",
]
