"""Tests for TF weighting schemes."""
from __future__ import annotations

import math

import pytest

from tfidf_core import (
    BinaryTf,
    DoubleHalfNormalizationTf,
    DoubleKNormalizationTf,
    LogNormalizationTf,
    PairListDocument,
    RawFrequencyTf,
    TermSetDocument,
    double_k_normalization,
)

from conftest import D1_PAIRS, D2_PAIRS, REPRESENTATIONS


class DoubleQuarterNormalizationTf(DoubleKNormalizationTf):
    @classmethod
    def factor(cls) -> float:
        return 0.25


class TestBinaryTf:
    """Test binary term presence weighting."""

    def test_present_and_absent(self, wiki_corpus) -> None:
        d1, _ = wiki_corpus
        assert BinaryTf.tf("a", d1) == 1.0
        assert BinaryTf.tf("another", d1) == 0.0

    def test_naive_document(self) -> None:
        doc = TermSetDocument({"a", "b"})
        assert BinaryTf.tf("a", doc) == 1.0
        assert BinaryTf.tf("c", doc) == 0.0

    def test_bare_containers(self) -> None:
        assert BinaryTf.tf("a", {"a", "b"}) == 1.0
        assert BinaryTf.tf("a", {"a": 3}) == 1.0
        assert BinaryTf.tf("a", [("b", 1)]) == 0.0


class TestRawFrequencyTf:
    """Test raw count weighting."""

    def test_matches_term_frequency(self, wiki_corpus) -> None:
        for doc in wiki_corpus:
            for term in ["this", "is", "a", "sample", "another", "example"]:
                assert RawFrequencyTf.tf(term, doc) == float(doc.term_frequency(term))

    def test_absent_term_is_zero(self, wiki_corpus) -> None:
        assert RawFrequencyTf.tf("missing", wiki_corpus[0]) == 0.0

    def test_requires_processed_document(self) -> None:
        with pytest.raises(TypeError):
            RawFrequencyTf.tf("a", TermSetDocument({"a"}))


class TestLogNormalizationTf:
    """Test 1 + ln(f) weighting."""

    def test_single_occurrence(self, wiki_corpus) -> None:
        assert LogNormalizationTf.tf("this", wiki_corpus[0]) == 1.0

    def test_repeated_term(self, wiki_corpus) -> None:
        assert LogNormalizationTf.tf("example", wiki_corpus[1]) == pytest.approx(1.0 + math.log(3))

    def test_absent_term_is_negative_infinity(self, wiki_corpus) -> None:
        assert LogNormalizationTf.tf("missing", wiki_corpus[0]) == -math.inf

    def test_empty_document(self) -> None:
        assert LogNormalizationTf.tf("a", PairListDocument([])) == -math.inf


class TestDoubleHalfNormalizationTf:
    """Test 0.5 + 0.5 * f / max_f weighting."""

    def test_factor(self) -> None:
        assert DoubleHalfNormalizationTf.factor() == 0.5

    def test_most_frequent_term(self, wiki_corpus) -> None:
        assert DoubleHalfNormalizationTf.tf("a", wiki_corpus[0]) == 1.0

    def test_less_frequent_term(self, wiki_corpus) -> None:
        assert DoubleHalfNormalizationTf.tf("this", wiki_corpus[0]) == 0.75

    def test_absent_term_is_k(self, wiki_corpus) -> None:
        assert DoubleHalfNormalizationTf.tf("missing", wiki_corpus[0]) == 0.5

    def test_empty_document_uses_unit_max(self) -> None:
        assert DoubleHalfNormalizationTf.tf("a", []) == 0.5


class TestDoubleKNormalizationTf:
    """Test the parametric double normalization family."""

    def test_family_without_factor(self) -> None:
        with pytest.raises(NotImplementedError):
            DoubleKNormalizationTf.tf("a", PairListDocument(D1_PAIRS))

    def test_subclass_supplies_factor(self) -> None:
        doc = PairListDocument(D2_PAIRS)
        assert DoubleQuarterNormalizationTf.tf("example", doc) == 1.0
        assert DoubleQuarterNormalizationTf.tf("this", doc) == pytest.approx(0.25 + 0.75 / 3)

    def test_factory(self) -> None:
        third = double_k_normalization(0.3)
        assert issubclass(third, DoubleKNormalizationTf)
        assert third.factor() == 0.3
        assert third.tf("this", PairListDocument(D1_PAIRS)) == pytest.approx(0.65)

    def test_factory_name(self) -> None:
        assert double_k_normalization(0.3, name="DoubleThirdTf").__name__ == "DoubleThirdTf"

    @pytest.mark.parametrize("k", [0.0, 0.25, 0.5, 0.9, 1.0])
    @pytest.mark.parametrize("kind", sorted(REPRESENTATIONS))
    def test_bounded_by_k_and_one(self, k: float, kind: str) -> None:
        strategy = double_k_normalization(k)
        doc = REPRESENTATIONS[kind](D2_PAIRS)
        for term, _ in D2_PAIRS:
            assert k <= strategy.tf(term, doc) <= 1.0

    @pytest.mark.parametrize("term", ["a", "b"])
    def test_duplicate_pair_entries_stay_bounded(self, term: str) -> None:
        doc = PairListDocument([("a", 1), ("b", 2), ("a", 5)])
        assert 0.5 <= DoubleHalfNormalizationTf.tf(term, doc) <= 1.0
        assert DoubleHalfNormalizationTf.tf("b", doc) == 1.0

    def test_out_of_range_factor_is_not_checked(self) -> None:
        strategy = double_k_normalization(2.0)
        assert strategy.tf("this", PairListDocument(D1_PAIRS)) == pytest.approx(1.5)

    def test_pure(self, wiki_corpus) -> None:
        first = DoubleHalfNormalizationTf.tf("sample", wiki_corpus[0])
        assert DoubleHalfNormalizationTf.tf("sample", wiki_corpus[0]) == first
