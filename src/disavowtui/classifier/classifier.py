"""Heuristic that tells URL-ish entries from free-form text.

Backlink exports often mix comments and column headers into the URL list.
``looks_like_url`` is the filter applied when plain text should be skipped.
It is intentionally loose: anything containing a dot passes, so version
numbers and ellipses are admitted too.
"""

from disavowtui.core.constants import DOMAIN_PREFIX, URL_PREFIXES


def looks_like_url(token: str) -> bool:
    """Return True if a token is plausibly a URL or a domain.

    Rules, checked in order on the trimmed, lowercased token:
    1. ``domain:`` prefix
    2. ``http://`` or ``https://`` prefix
    3. ``www.`` prefix
    4. contains a dot anywhere

    Args:
        token: Single entry produced by the tokenizer

    Returns:
        True if the token should be canonicalized, False for plain text
    """
    target = token.strip().lower()
    if not target:
        return False

    if target.startswith(DOMAIN_PREFIX):
        return True

    if target.startswith(URL_PREFIXES):
        return True

    if target.startswith("www."):
        return True

    return "." in target
