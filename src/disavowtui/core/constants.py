"""Constants used throughout DisavowTUI.

This module contains the directive format, token delimiters, default
settings and status message templates shared by the CLI and the TUI.
"""

import re
from enum import Enum


class StatusKind(str, Enum):
    """Kind of the last status line shown to the user."""
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


# Directive prefix for every canonical entry
DOMAIN_PREFIX = "domain:"

# Scheme assumed for entries pasted without one; only the host is kept
DEFAULT_SCHEME = "https://"

# Any run of newline, comma, semicolon or tab separates entries
TOKEN_DELIMITERS = re.compile(r"[\n,;\t]+")

URL_PREFIXES = ("http://", "https://")

WWW_PREFIX = re.compile(r"^(?:www\.)+", re.IGNORECASE)

DIRECTIVE_PREFIX = re.compile(r"^domain:", re.IGNORECASE)

# Characters a URL host may not contain
FORBIDDEN_HOST_CHARS = frozenset(" \t\n\r#%/:<>?@[\\]^|\"{}`")

REPLACEMENT_CHAR = "\ufffd"

EXPORT_NAME_TEMPLATE = "disavow-{stamp}.txt"

SOURCE_EXTENSIONS = (".txt", ".csv", ".tsv")


# Application-wide defaults
DEFAULTS = {
    "comment": "# Disavow list",
    "dedupe": True,
    "skip_non_url": True,
    "utf8_check": False,
    "theme": "slate",
    "download_dir": None,
    "log_level": "WARNING",
    "log_file": None,
}


# Status lines, mirrored by the CLI and the TUI
STATUS_MESSAGES = {
    "nothing": "Nothing to format.",
    "trimmed": "Trimmed {total} entries into {output}.",
    "dedupe_on": "Removed duplicates: {output}/{total} domains left.",
    "dedupe_off": "Showing all {output} entries.",
    "skip_on": "Skipped plain text: {output}/{total} entries kept.",
    "skip_off": "Including all {output} entries.",
    "greenlist_loaded": "Greenlist loaded ({count} domains).",
    "greenlist_empty": "Greenlist empty; nothing to skip.",
    "greenlist_applied": "Greenlist applied: {output}/{total} domains kept.",
    "greenlist_cleared": "Greenlist cleared: {output}/{total} domains available.",
    "greenlist_paste_missing": "Paste greenlist domains first.",
    "source_verified": "UTF-8 verified: {name}",
    "source_loaded": "Loaded {name}",
    "source_decode_failed": "UTF-8 verification failed for {name}",
    "source_read_failed": "Failed to read {name}",
    "copied": "Copied to clipboard.",
    "saved": "Saved {path}",
}
