"""TF-IDF Weighting Base - Strategy Contracts.

Strategies are stateless classes. Their scoring entry points are
classmethods, so a strategy is selected by naming its class and is never
instantiated:

    RawFrequencyTf.tf("a", doc)
    InverseFrequencyIdf.idf("a", corpus)

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable

from tfidf_core.document.base import DocumentTier


class Tf(ABC):
    """Strategy computing a weighted or unweighted term frequency.

    Attributes:
        name: Scheme name used in configuration and explanations
        requires: Document tiers the strategy needs
    """

    name: str = ""
    requires: DocumentTier = DocumentTier.NAIVE

    @classmethod
    @abstractmethod
    def tf(cls, term: Any, doc: Any) -> float:
        """Return the term frequency weight of a term within a document."""
        pass


class Idf(ABC):
    """Strategy computing an inverse document frequency over a corpus.

    The corpus is any iterable of documents and is consumed exactly once.

    Attributes:
        name: Scheme name used in configuration and explanations
        requires: Tiers every corpus document needs
    """

    name: str = ""
    requires: DocumentTier = DocumentTier.NAIVE

    @classmethod
    @abstractmethod
    def idf(cls, term: Any, corpus: Iterable[Any]) -> float:
        """Return the inverse document frequency weight of a term."""
        pass


class NormalizationFactor(ABC):
    """A strategy that supplies a normalization factor, K."""

    @classmethod
    @abstractmethod
    def factor(cls) -> float:
        raise NotImplementedError(f"{cls.__name__} does not declare a normalization factor")


class SmoothingFactor(ABC):
    """A strategy that supplies a smoothing factor, s."""

    @classmethod
    @abstractmethod
    def factor(cls) -> float:
        raise NotImplementedError(f"{cls.__name__} does not declare a smoothing factor")


__all__ = ["Tf", "Idf", "NormalizationFactor", "SmoothingFactor"]
