"""TF-IDF Core - Strategy Based Term Weighting.

Computes TF-IDF scores for terms drawn from caller-defined documents. Any TF
weighting scheme can be paired with any IDF weighting scheme, and all of
them share one document abstraction.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                              TF-IDF Core                                    │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                         Combinator                                  │   │
│   │        TfIdf.tfidf(term, doc, corpus) = tf(term, doc) * idf(term)   │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌────────────────────────────────┐  ┌────────────────────────────────┐    │
│   │          TF Schemes            │  │          IDF Schemes           │    │
│   │  Binary       RawFrequency     │  │  Unary       InverseFrequency  │    │
│   │  LogNormalization              │  │  InverseFrequencySmooth        │    │
│   │  DoubleK(K) → DoubleHalf       │  │  Smoothed(s)  InverseFreqMax   │    │
│   └────────────────────────────────┘  └────────────────────────────────┘    │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                         Documents                                   │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Naive    │← │ Processed  │  │ Expandable │  │  Built-in  │    │   │
│   │  │            │  │            │  │            │  │ Containers │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Example:
    >>> from tfidf_core import TfIdfDefault
    >>> docs = [[("a", 3), ("b", 2), ("c", 4)], [("a", 2), ("d", 5)]]
    >>> TfIdfDefault.tfidf("a", docs[0], docs)
    0.0

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Documents
from tfidf_core.document.base import (
    DocumentTier,
    NaiveDocument,
    ProcessedDocument,
    ExpandableDocument,
    tier_of,
    supports,
)
from tfidf_core.document.builtin import (
    PairListDocument,
    HashMapDocument,
    SortedMapDocument,
    TermSetDocument,
    as_document,
)

# Weighting
from tfidf_core.weighting.base import (
    Tf,
    Idf,
    NormalizationFactor,
    SmoothingFactor,
)
from tfidf_core.weighting.tf import (
    BinaryTf,
    RawFrequencyTf,
    LogNormalizationTf,
    DoubleKNormalizationTf,
    DoubleHalfNormalizationTf,
    double_k_normalization,
)
from tfidf_core.weighting.idf import (
    UnaryIdf,
    InverseFrequencySmoothedIdf,
    InverseFrequencyIdf,
    InverseFrequencySmoothIdf,
    InverseFrequencyMaxIdf,
    inverse_frequency_smoothed,
)
from tfidf_core.weighting.combinator import (
    TfIdf,
    TfIdfDefault,
    compose,
)

# Configuration
from tfidf_core.config import (
    TfScheme,
    IdfScheme,
    StrategyRegistry,
    TfIdfConfig,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Documents
    "DocumentTier",
    "NaiveDocument",
    "ProcessedDocument",
    "ExpandableDocument",
    "tier_of",
    "supports",
    "PairListDocument",
    "HashMapDocument",
    "SortedMapDocument",
    "TermSetDocument",
    "as_document",
    # Weighting
    "Tf",
    "Idf",
    "NormalizationFactor",
    "SmoothingFactor",
    "BinaryTf",
    "RawFrequencyTf",
    "LogNormalizationTf",
    "DoubleKNormalizationTf",
    "DoubleHalfNormalizationTf",
    "double_k_normalization",
    "UnaryIdf",
    "InverseFrequencySmoothedIdf",
    "InverseFrequencyIdf",
    "InverseFrequencySmoothIdf",
    "InverseFrequencyMaxIdf",
    "inverse_frequency_smoothed",
    "TfIdf",
    "TfIdfDefault",
    "compose",
    # Configuration
    "TfScheme",
    "IdfScheme",
    "StrategyRegistry",
    "TfIdfConfig",
]
