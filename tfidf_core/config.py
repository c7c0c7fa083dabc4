"""TF-IDF Configuration - Scheme Selection and Strategy Registry.

Lets a TF-IDF scheme be chosen by name, e.g. from a settings file:

    config = TfIdfConfig.from_dict({"tf": "raw_frequency", "idf": "inverse_frequency_smooth"})
    scheme = config.build()
    scheme.tfidf("a", doc, corpus)

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, Union

from tfidf_core.weighting.base import Idf, Tf
from tfidf_core.weighting.combinator import TfIdf, TfIdfDefault, compose
from tfidf_core.weighting.idf import (
    InverseFrequencyIdf,
    InverseFrequencyMaxIdf,
    InverseFrequencySmoothIdf,
    UnaryIdf,
    inverse_frequency_smoothed,
)
from tfidf_core.weighting.tf import (
    BinaryTf,
    DoubleHalfNormalizationTf,
    LogNormalizationTf,
    RawFrequencyTf,
    double_k_normalization,
)

logger = logging.getLogger(__name__)


class TfScheme(Enum):
    """Built-in TF weighting schemes."""

    BINARY = "binary"
    RAW_FREQUENCY = "raw_frequency"
    LOG_NORMALIZATION = "log_normalization"
    DOUBLE_HALF_NORMALIZATION = "double_half_normalization"
    DOUBLE_K_NORMALIZATION = "double_k_normalization"  # needs normalization_factor


class IdfScheme(Enum):
    """Built-in IDF weighting schemes."""

    UNARY = "unary"
    INVERSE_FREQUENCY = "inverse_frequency"
    INVERSE_FREQUENCY_SMOOTH = "inverse_frequency_smooth"
    INVERSE_FREQUENCY_MAX = "inverse_frequency_max"
    INVERSE_FREQUENCY_SMOOTHED = "inverse_frequency_smoothed"  # needs smoothing_factor


class StrategyRegistry:
    """Registry of TF and IDF strategies available by name."""

    _tf: Dict[str, Type[Tf]] = {}
    _idf: Dict[str, Type[Idf]] = {}

    @classmethod
    def register(cls, name: str, kind: str = "tf") -> Callable:
        """Register a strategy class.

        Args:
            name: Scheme name
            kind: "tf" or "idf"

        Returns:
            Decorator function
        """
        if kind not in ("tf", "idf"):
            raise ValueError(f"Unknown strategy kind: {kind}")

        def decorator(strategy: type) -> type:
            base = Tf if kind == "tf" else Idf
            if not (isinstance(strategy, type) and issubclass(strategy, base)):
                raise TypeError(f"{strategy!r} is not a {base.__name__} strategy")
            registry = cls._tf if kind == "tf" else cls._idf
            registry[name] = strategy
            logger.debug(f"Registered {kind} strategy {name}: {strategy.__name__}")
            return strategy

        return decorator

    @classmethod
    def get_tf(cls, name: str) -> Optional[Type[Tf]]:
        """Get TF strategy by name, or None."""
        return cls._tf.get(name)

    @classmethod
    def get_idf(cls, name: str) -> Optional[Type[Idf]]:
        """Get IDF strategy by name, or None."""
        return cls._idf.get(name)

    @classmethod
    def list_tf(cls) -> List[str]:
        return list(cls._tf.keys())

    @classmethod
    def list_idf(cls) -> List[str]:
        return list(cls._idf.keys())

    @classmethod
    def unregister(cls, name: str, kind: str = "tf") -> bool:
        """Remove a registered strategy. Returns True if it existed."""
        if kind not in ("tf", "idf"):
            raise ValueError(f"Unknown strategy kind: {kind}")
        registry = cls._tf if kind == "tf" else cls._idf
        return registry.pop(name, None) is not None


# Register built-in strategies
StrategyRegistry._tf = {
    TfScheme.BINARY.value: BinaryTf,
    TfScheme.RAW_FREQUENCY.value: RawFrequencyTf,
    TfScheme.LOG_NORMALIZATION.value: LogNormalizationTf,
    TfScheme.DOUBLE_HALF_NORMALIZATION.value: DoubleHalfNormalizationTf,
}
StrategyRegistry._idf = {
    IdfScheme.UNARY.value: UnaryIdf,
    IdfScheme.INVERSE_FREQUENCY.value: InverseFrequencyIdf,
    IdfScheme.INVERSE_FREQUENCY_SMOOTH.value: InverseFrequencySmoothIdf,
    IdfScheme.INVERSE_FREQUENCY_MAX.value: InverseFrequencyMaxIdf,
}


def _scheme_name(value: Union[Enum, str]) -> str:
    return value.value if isinstance(value, Enum) else str(value)


@dataclass
class TfIdfConfig:
    """TF-IDF scheme configuration.

    Attributes:
        tf: TF scheme, a TfScheme or any registered name
        idf: IDF scheme, an IdfScheme or any registered name
        normalization_factor: K for the double_k_normalization TF scheme
        smoothing_factor: s for the inverse_frequency_smoothed IDF scheme
    """

    tf: Union[TfScheme, str] = TfScheme.DOUBLE_HALF_NORMALIZATION
    idf: Union[IdfScheme, str] = IdfScheme.INVERSE_FREQUENCY
    normalization_factor: Optional[float] = None
    smoothing_factor: Optional[float] = None

    def tf_strategy(self) -> Type[Tf]:
        """Resolve the configured TF strategy."""
        name = _scheme_name(self.tf)
        if name == TfScheme.DOUBLE_K_NORMALIZATION.value:
            if self.normalization_factor is None:
                raise ValueError("double_k_normalization requires normalization_factor")
            return double_k_normalization(self.normalization_factor)
        strategy = StrategyRegistry.get_tf(name)
        if strategy is None:
            raise ValueError(f"Unknown TF scheme: {name}")
        return strategy

    def idf_strategy(self) -> Type[Idf]:
        """Resolve the configured IDF strategy."""
        name = _scheme_name(self.idf)
        if name == IdfScheme.INVERSE_FREQUENCY_SMOOTHED.value:
            if self.smoothing_factor is None:
                raise ValueError("inverse_frequency_smoothed requires smoothing_factor")
            return inverse_frequency_smoothed(self.smoothing_factor)
        strategy = StrategyRegistry.get_idf(name)
        if strategy is None:
            raise ValueError(f"Unknown IDF scheme: {name}")
        return strategy

    def build(self) -> Type[TfIdf]:
        """Build the configured TF-IDF scheme."""
        tf = self.tf_strategy()
        idf = self.idf_strategy()
        if tf is TfIdfDefault.tf_strategy and idf is TfIdfDefault.idf_strategy:
            return TfIdfDefault
        logger.debug(f"Building TF-IDF scheme tf={tf.__name__} idf={idf.__name__}")
        return compose(tf, idf)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "tf": _scheme_name(self.tf),
            "idf": _scheme_name(self.idf),
            "normalization_factor": self.normalization_factor,
            "smoothing_factor": self.smoothing_factor,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TfIdfConfig":
        """Create from dictionary."""
        return cls(
            tf=data.get("tf", TfScheme.DOUBLE_HALF_NORMALIZATION.value),
            idf=data.get("idf", IdfScheme.INVERSE_FREQUENCY.value),
            normalization_factor=data.get("normalization_factor"),
            smoothing_factor=data.get("smoothing_factor"),
        )


__all__ = ["TfScheme", "IdfScheme", "StrategyRegistry", "TfIdfConfig"]
