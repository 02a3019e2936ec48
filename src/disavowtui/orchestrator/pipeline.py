"""Disavow pipeline: tokenize, classify, canonicalize, dedupe, exclude.

Every function here is pure. Callers pass the raw text, the flags and the
exclusion set on each call and get a fresh PipelineResult back; nothing is
cached between runs.
"""

import logging
from typing import AbstractSet

from disavowtui.classifier.classifier import looks_like_url
from disavowtui.classifier.deduper import deduplicate, exclude
from disavowtui.classifier.normalizer import canonicalize
from disavowtui.classifier.tokenizer import tokenize
from disavowtui.core.models import PipelineResult, ProcessOptions


logger = logging.getLogger(__name__)


def process(
    raw_text: str,
    dedupe: bool,
    skip_non_url: bool,
    exclusion_set: AbstractSet[str] = frozenset(),
) -> PipelineResult:
    """Turn raw text into a filtered list of disavow directives.

    Args:
        raw_text: Pasted text or file contents
        dedupe: Remove repeated domains, keeping first occurrences
        skip_non_url: Drop entries that do not look like a URL or domain
        exclusion_set: Canonical directives to remove from the output

    Returns:
        PipelineResult with the raw token count, the cleaned list and the
        list left after exclusion
    """
    if not raw_text or not raw_text.strip():
        return PipelineResult.empty()

    tokens = tokenize(raw_text)
    total = len(tokens)

    processed = []
    skipped = 0
    rejected = 0
    for token in tokens:
        if skip_non_url and not looks_like_url(token):
            skipped += 1
            continue
        directive = canonicalize(token)
        if directive is None:
            rejected += 1
            continue
        processed.append(directive)

    cleaned = deduplicate(processed) if dedupe else processed
    filtered = exclude(cleaned, exclusion_set)

    logger.debug(
        f"Processed {total} tokens: {skipped} skipped as plain text, "
        f"{rejected} rejected, {len(processed) - len(cleaned)} duplicates, "
        f"{len(cleaned) - len(filtered)} excluded, {len(filtered)} kept"
    )

    return PipelineResult(total=total, cleaned=cleaned, filtered=filtered)


def process_with_options(
    raw_text: str,
    options: ProcessOptions,
    exclusion_set: AbstractSet[str] = frozenset(),
) -> PipelineResult:
    """Run process() with flags bundled in ProcessOptions."""
    return process(
        raw_text,
        dedupe=options.dedupe,
        skip_non_url=options.skip_non_url,
        exclusion_set=exclusion_set,
    )


def build_exclusion_set(raw_text: str) -> frozenset[str]:
    """Build a greenlist from raw text.

    Every token is canonicalized, URL-like or not; rejects are dropped.

    Args:
        raw_text: Greenlist text as pasted or read from a file

    Returns:
        Frozen set of canonical directives
    """
    return frozenset(
        directive
        for directive in (canonicalize(token) for token in tokenize(raw_text))
        if directive is not None
    )
