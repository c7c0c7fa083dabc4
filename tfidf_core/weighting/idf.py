"""TF-IDF Inverse Document Frequency - IDF Weighting Schemes.

With ``N`` the number of documents iterated and ``n_t`` the number of
documents containing the term:

    UnaryIdf                   1 if any document contains the term, else 0
    InverseFrequencyIdf        ln(N / n_t)
    InverseFrequencySmoothIdf  ln(1 + N / n_t)
    InverseFrequencyMaxIdf     ln(1 + max_nt / N)

Every strategy consumes the corpus iterable exactly once. An empty corpus or
a term absent from the corpus gives a non-finite result instead of raising.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Type

from tfidf_core.document.base import DocumentTier
from tfidf_core.document.builtin import as_document
from tfidf_core.math_utils import divide, ln
from tfidf_core.weighting.base import Idf, SmoothingFactor

logger = logging.getLogger(__name__)


class UnaryIdf(Idf):
    """Unary IDF. Returns 1 if any corpus document contains the term, else 0."""

    name = "unary"
    requires = DocumentTier.NAIVE

    @classmethod
    def idf(cls, term: Any, corpus: Iterable[Any]) -> float:
        for doc in corpus:
            if as_document(doc, cls.requires).term_exists(term):
                return 1.0
        return 0.0


class InverseFrequencySmoothedIdf(Idf, SmoothingFactor):
    """Inverse frequency IDF family with a smoothing factor, s.

    Computes ``ln(s + N / n_t)``. Subclasses only supply ``factor()``.
    """

    name = "inverse_frequency_smoothed"
    requires = DocumentTier.NAIVE

    @classmethod
    def idf(cls, term: Any, corpus: Iterable[Any]) -> float:
        containing = 0
        total = 0
        for doc in corpus:
            total += 1
            if as_document(doc, cls.requires).term_exists(term):
                containing += 1

        if total == 0:
            logger.debug(f"{cls.__name__}: empty corpus")
        elif containing == 0:
            logger.debug(f"{cls.__name__}: term {term!r} not found in {total} documents")

        return ln(cls.factor() + divide(total, containing))


class InverseFrequencyIdf(InverseFrequencySmoothedIdf):
    """Inverse frequency IDF. Computes ``ln(N / n_t)``."""

    name = "inverse_frequency"

    @classmethod
    def factor(cls) -> float:
        return 0.0


class InverseFrequencySmoothIdf(InverseFrequencySmoothedIdf):
    """Smoothed inverse frequency IDF. Computes ``ln(1 + N / n_t)``."""

    name = "inverse_frequency_smooth"

    @classmethod
    def factor(cls) -> float:
        return 1.0


class InverseFrequencyMaxIdf(Idf):
    """Max inverse frequency IDF. Computes ``ln(1 + max_nt / N)``.

    ``max_nt`` is the largest number of documents any single term occurs in.
    Each document adds one for every distinct term it exposes through
    ``terms()``. When the corpus holds no terms, ``max_nt`` is 1. Terms must
    be hashable.
    """

    name = "inverse_frequency_max"
    requires = DocumentTier.PROCESSED | DocumentTier.EXPANDABLE

    @classmethod
    def idf(cls, term: Any, corpus: Iterable[Any]) -> float:
        counts: Dict[Any, int] = {}
        total = 0
        for doc in corpus:
            doc = as_document(doc, cls.requires)
            total += 1
            for entry in set(doc.terms()):
                if doc.term_exists(entry):
                    counts[entry] = counts.get(entry, 0) + 1

        if total == 0:
            logger.debug(f"{cls.__name__}: empty corpus")

        max_nt = max(counts.values(), default=1)
        return ln(1.0 + divide(max_nt, total))


def inverse_frequency_smoothed(s: float, name: Optional[str] = None) -> Type[InverseFrequencySmoothedIdf]:
    """Create an inverse frequency IDF strategy with a fixed smoothing factor.

    Args:
        s: Smoothing factor. Not range checked.
        name: Class name for the new strategy

    Returns:
        InverseFrequencySmoothedIdf subclass
    """
    s = float(s)
    cls_name = name or f"InverseFrequencySmoothedIdf(s={s})"
    logger.debug(f"Creating IDF strategy {cls_name}")
    return type(
        cls_name,
        (InverseFrequencySmoothedIdf,),
        {"factor": classmethod(lambda cls: s), "__doc__": f"Inverse frequency IDF with s = {s}."},
    )


__all__ = [
    "UnaryIdf",
    "InverseFrequencySmoothedIdf",
    "InverseFrequencyIdf",
    "InverseFrequencySmoothIdf",
    "InverseFrequencyMaxIdf",
    "inverse_frequency_smoothed",
]
