"""TF-IDF Document Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

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

__all__ = [
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
]
