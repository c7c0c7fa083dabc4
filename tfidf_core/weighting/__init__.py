"""TF-IDF Weighting Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from tfidf_core.weighting.base import Tf, Idf, NormalizationFactor, SmoothingFactor
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
from tfidf_core.weighting.combinator import TfIdf, TfIdfDefault, compose

__all__ = [
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
]
