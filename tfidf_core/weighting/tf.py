"""TF-IDF Term Frequency - TF Weighting Schemes.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Type

from tfidf_core.document.base import DocumentTier
from tfidf_core.document.builtin import as_document
from tfidf_core.math_utils import divide, ln
from tfidf_core.weighting.base import NormalizationFactor, Tf

logger = logging.getLogger(__name__)


class BinaryTf(Tf):
    """Binary TF. Returns 1 if the document contains the term, else 0."""

    name = "binary"
    requires = DocumentTier.NAIVE

    @classmethod
    def tf(cls, term: Any, doc: Any) -> float:
        doc = as_document(doc, cls.requires)
        return 1.0 if doc.term_exists(term) else 0.0


class RawFrequencyTf(Tf):
    """Raw frequency TF. Returns the number of times the term occurs."""

    name = "raw_frequency"
    requires = DocumentTier.PROCESSED

    @classmethod
    def tf(cls, term: Any, doc: Any) -> float:
        doc = as_document(doc, cls.requires)
        return float(doc.term_frequency(term))


class LogNormalizationTf(Tf):
    """Log normalized TF. Computes ``1 + ln(f)``.

    An absent term gives ``ln(0)``, so the result is -inf.
    """

    name = "log_normalization"
    requires = DocumentTier.PROCESSED

    @classmethod
    def tf(cls, term: Any, doc: Any) -> float:
        doc = as_document(doc, cls.requires)
        return 1.0 + ln(doc.term_frequency(term))


class DoubleKNormalizationTf(Tf, NormalizationFactor):
    """Double normalized TF family based on a factor, K.

    Computes ``K + (1 - K) * f / max_f`` where ``max_f`` is the count of the
    document's most frequent term, or 1 for an empty document. Subclasses
    only supply ``factor()``:

        class DoubleThirdNormalizationTf(DoubleKNormalizationTf):
            @classmethod
            def factor(cls) -> float:
                return 0.3
    """

    name = "double_k_normalization"
    requires = DocumentTier.PROCESSED

    @classmethod
    def tf(cls, term: Any, doc: Any) -> float:
        doc = as_document(doc, cls.requires)
        top = doc.max()
        max_f = doc.term_frequency(top) if top is not None else 1
        k = cls.factor()
        return k + (1.0 - k) * divide(doc.term_frequency(term), max_f)


class DoubleHalfNormalizationTf(DoubleKNormalizationTf):
    """Double normalized TF with ``K = 0.5``."""

    name = "double_half_normalization"

    @classmethod
    def factor(cls) -> float:
        return 0.5


def double_k_normalization(k: float, name: Optional[str] = None) -> Type[DoubleKNormalizationTf]:
    """Create a double normalized TF strategy with a fixed factor.

    Args:
        k: Normalization factor, normally in [0, 1]. Not range checked.
        name: Class name for the new strategy

    Returns:
        DoubleKNormalizationTf subclass
    """
    k = float(k)
    cls_name = name or f"DoubleKNormalizationTf(k={k})"
    logger.debug(f"Creating TF strategy {cls_name}")
    return type(
        cls_name,
        (DoubleKNormalizationTf,),
        {"factor": classmethod(lambda cls: k), "__doc__": f"Double normalized TF with K = {k}."},
    )


__all__ = [
    "BinaryTf",
    "RawFrequencyTf",
    "LogNormalizationTf",
    "DoubleKNormalizationTf",
    "DoubleHalfNormalizationTf",
    "double_k_normalization",
]
