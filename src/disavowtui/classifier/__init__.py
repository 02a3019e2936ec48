"""Entry tokenization, classification, canonicalization and deduplication.

This package provides the pure building blocks of the disavow pipeline:
- tokenize: Split loosely structured text into candidate entries
- looks_like_url: Cheap heuristic separating URLs/domains from plain text
- canonicalize / DomainNormalizer: Reduce an entry to ``domain:<host>``
- deduplicate / exclude: Order-preserving dedupe and exclusion filtering
"""

from disavowtui.classifier.tokenizer import tokenize
from disavowtui.classifier.classifier import looks_like_url
from disavowtui.classifier.normalizer import DomainNormalizer, canonicalize
from disavowtui.classifier.deduper import deduplicate, exclude

__all__ = [
    "tokenize",
    "looks_like_url",
    "DomainNormalizer",
    "canonicalize",
    "deduplicate",
    "exclude",
]
