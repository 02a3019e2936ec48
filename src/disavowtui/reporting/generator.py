"""Disavow document generation.

The export format is plain UTF-8 text: an optional comment line followed
by one ``domain:<host>`` directive per line.
"""

from datetime import date
from typing import Iterable, Optional

from disavowtui.core.constants import EXPORT_NAME_TEMPLATE, REPLACEMENT_CHAR


def build_preview(comment: str, domains: Iterable[str]) -> str:
    """Assemble the export document.

    Args:
        comment: Comment line; trimmed, and omitted when blank
        domains: Canonical directives in output order

    Returns:
        Newline separated document without a trailing newline
    """
    lines = [comment.strip() if comment else ""]
    lines.extend(domains)
    return "\n".join(line for line in lines if line)


def is_utf8_safe(text: str) -> bool:
    """Check that no undecodable bytes were carried into the text.

    Lenient decoding replaces invalid bytes with U+FFFD, so its presence
    means the source was not clean UTF-8.
    """
    return REPLACEMENT_CHAR not in text


def default_export_name(today: Optional[date] = None) -> str:
    """File name for a download, e.g. ``disavow-20261018.txt``."""
    today = today or date.today()
    return EXPORT_NAME_TEMPLATE.format(stamp=today.strftime("%Y%m%d"))
