"""TF-IDF Combinator - Pairs a TF Strategy with an IDF Strategy.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional, Type

from tfidf_core.document.base import DocumentTier
from tfidf_core.document.builtin import as_document
from tfidf_core.weighting.base import Idf, Tf
from tfidf_core.weighting.idf import InverseFrequencyIdf
from tfidf_core.weighting.tf import DoubleHalfNormalizationTf

logger = logging.getLogger(__name__)


class TfIdf:
    """TF-IDF scheme built from one TF and one IDF strategy.

    Subclasses name the strategies as class attributes:

        class MyTfIdf(TfIdf):
            tf_strategy = RawFrequencyTf
            idf_strategy = InverseFrequencySmoothIdf

        MyTfIdf.tfidf("a", doc, corpus)

    The scored document must satisfy the tiers of both strategies. Corpus
    documents must satisfy the IDF strategy's tiers.
    """

    tf_strategy: Optional[Type[Tf]] = None
    idf_strategy: Optional[Type[Idf]] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.tf_strategy is not None and not (isinstance(cls.tf_strategy, type) and issubclass(cls.tf_strategy, Tf)):
            raise TypeError(f"{cls.__name__}.tf_strategy must be a Tf strategy, got {cls.tf_strategy!r}")
        if cls.idf_strategy is not None and not (isinstance(cls.idf_strategy, type) and issubclass(cls.idf_strategy, Idf)):
            raise TypeError(f"{cls.__name__}.idf_strategy must be an Idf strategy, got {cls.idf_strategy!r}")

    @classmethod
    def _strategies(cls):
        if cls.tf_strategy is None or cls.idf_strategy is None:
            raise NotImplementedError(f"{cls.__name__} does not choose both a TF and an IDF strategy")
        return cls.tf_strategy, cls.idf_strategy

    @classmethod
    def requires(cls) -> DocumentTier:
        """Tiers the scored document must satisfy."""
        tf, idf = cls._strategies()
        return tf.requires | idf.requires

    @classmethod
    def tfidf(cls, term: Any, doc: Any, corpus: Iterable[Any]) -> float:
        """Return ``tf(term, doc) * idf(term, corpus)``."""
        tf, idf = cls._strategies()
        doc = as_document(doc, cls.requires())
        return tf.tf(term, doc) * idf.idf(term, corpus)

    @classmethod
    def explain(cls, term: Any, doc: Any, corpus: Iterable[Any]) -> Dict[str, Any]:
        """Score a term and report how the score was composed."""
        tf, idf = cls._strategies()
        doc = as_document(doc, cls.requires())
        tf_value = tf.tf(term, doc)
        idf_value = idf.idf(term, corpus)
        return {
            "score": tf_value * idf_value,
            "description": f"{cls.__name__}(tf={tf.__name__}, idf={idf.__name__})",
            "details": {
                "tf": tf_value,
                "idf": idf_value,
                "tf_strategy": tf.name,
                "idf_strategy": idf.name,
            },
        }


class TfIdfDefault(TfIdf):
    """Default scheme: double half normalized TF with inverse frequency IDF."""

    tf_strategy = DoubleHalfNormalizationTf
    idf_strategy = InverseFrequencyIdf


def compose(tf: Type[Tf], idf: Type[Idf], name: Optional[str] = None) -> Type[TfIdf]:
    """Create a TfIdf scheme from a TF and an IDF strategy.

    Args:
        tf: TF strategy class
        idf: IDF strategy class
        name: Class name for the new scheme

    Returns:
        TfIdf subclass
    """
    if tf is None or idf is None:
        raise TypeError("compose needs both a TF and an IDF strategy")
    cls_name = name or f"TfIdf({getattr(tf, '__name__', tf)}, {getattr(idf, '__name__', idf)})"
    logger.debug(f"Composing {cls_name}")
    return type(cls_name, (TfIdf,), {"tf_strategy": tf, "idf_strategy": idf})


__all__ = ["TfIdf", "TfIdfDefault", "compose"]
