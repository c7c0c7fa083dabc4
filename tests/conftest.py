"""Shared fixtures for tfidf_core tests."""
from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from tfidf_core import HashMapDocument, PairListDocument, SortedMapDocument

D1_PAIRS = [("this", 1), ("is", 1), ("a", 2), ("sample", 1)]
D2_PAIRS = [("this", 1), ("is", 1), ("another", 2), ("example", 3)]

REPRESENTATIONS = {
    "pair_list": PairListDocument,
    "hash_map": HashMapDocument,
    "sorted_map": SortedMapDocument,
}


@pytest.fixture(params=sorted(REPRESENTATIONS))
def wiki_corpus(request: pytest.FixtureRequest) -> Tuple[Any, Any]:
    """The two-document example corpus in each document representation."""
    make = REPRESENTATIONS[request.param]
    return make(D1_PAIRS), make(D2_PAIRS)


@pytest.fixture()
def raw_corpus() -> List[List[Tuple[str, int]]]:
    """The example corpus as bare lists of pairs."""
    return [list(D1_PAIRS), list(D2_PAIRS)]
