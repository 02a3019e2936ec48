"""Domain canonicalization for disavow directives.

This module reduces a single pasted entry (full URL, bare domain, or an
existing ``domain:`` directive) to the canonical ``domain:<host>`` form.
It handles:
- Directive prefix removal
- Scheme inference for bare domains
- Hostname extraction with a best-effort fallback for unparsable input
- ``www.`` stripping, case folding and trailing dot removal

Entries that do not reduce to a host are rejected with None; nothing here
raises on bad input.
"""

from typing import Iterable, Optional
from urllib.parse import urlsplit

from disavowtui.core.constants import (
    DEFAULT_SCHEME,
    DIRECTIVE_PREFIX,
    DOMAIN_PREFIX,
    FORBIDDEN_HOST_CHARS,
    WWW_PREFIX,
)


class DomainNormalizer:
    """Canonicalize entries into ``domain:<host>`` directives.

    Normalization steps:
    1. Strip a leading ``domain:`` prefix (any case)
    2. Prepend ``https://`` when the entry carries no scheme
    3. Parse and take the hostname; fall back to the text before the
       first ``/``, ``?`` or ``#`` when parsing fails
    4. Strip leading ``www.`` labels (any case)
    5. Lowercase and drop trailing dots
    """

    def normalize(self, token: str) -> Optional[str]:
        """Canonicalize a single entry.

        Args:
            token: Entry to canonicalize

        Returns:
            ``domain:<host>`` string, or None if the entry has no host
        """
        host = self.get_hostname(token)
        if host is None:
            return None
        return f"{DOMAIN_PREFIX}{host}"

    def normalize_batch(self, tokens: Iterable[str]) -> list[str]:
        """Canonicalize a batch of entries.

        Args:
            tokens: Entries to canonicalize

        Returns:
            Canonical directives in input order (rejected entries are skipped)
        """
        normalized = []
        for token in tokens:
            directive = self.normalize(token)
            if directive is not None:
                normalized.append(directive)
        return normalized

    def get_hostname(self, token: str) -> Optional[str]:
        """Extract the canonical hostname of an entry.

        Args:
            token: Entry to process

        Returns:
            Lowercase hostname without ``www.``, or None if rejected
        """
        if not token or not isinstance(token, str):
            return None

        remainder = DIRECTIVE_PREFIX.sub("", token.strip(), count=1).strip()
        if not remainder:
            return None

        candidate = remainder if "://" in remainder else f"{DEFAULT_SCHEME}{remainder}"

        try:
            host = self._parse_hostname(candidate)
        except ValueError:
            host = self._fallback_hostname(remainder)

        if not host:
            return None

        host = WWW_PREFIX.sub("", host, count=1).lower().rstrip(".")

        if not host or "/" in host or any(ch.isspace() for ch in host):
            return None

        return host

    def _parse_hostname(self, candidate: str) -> str:
        """Parse a URL and return its host.

        Raises:
            ValueError: If the URL cannot be parsed or has no valid host
        """
        parsed = urlsplit(candidate.replace("\\", "/"))
        host = parsed.hostname

        if not host:
            raise ValueError(f"No host in '{candidate}'")

        # IPv6 literal, keep the brackets
        if ":" in host:
            return f"[{host}]"

        if any(ch in FORBIDDEN_HOST_CHARS for ch in host):
            raise ValueError(f"Invalid host '{host}'")

        return host

    def _fallback_hostname(self, remainder: str) -> str:
        """Take the authority before the first path, query or fragment marker.

        Any scheme, userinfo and port are dropped from the cut.
        """
        scheme_end = remainder.find("://")
        if scheme_end != -1:
            remainder = remainder[scheme_end + 3:]

        cut = len(remainder)
        for marker in ("/", "?", "#"):
            index = remainder.find(marker)
            if index != -1:
                cut = min(cut, index)

        host = remainder[:cut].rpartition("@")[2]
        if not host.startswith("["):
            host = host.partition(":")[0]
        return host


_default_normalizer = DomainNormalizer()


def canonicalize(token: str) -> Optional[str]:
    """Canonicalize an entry with the default normalizer."""
    return _default_normalizer.normalize(token)
