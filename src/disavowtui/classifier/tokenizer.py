"""Split pasted text or file contents into candidate entries."""

from disavowtui.core.constants import TOKEN_DELIMITERS


def tokenize(text: str) -> list[str]:
    """Split raw text on newlines, commas, semicolons and tabs.

    Carriage returns count as newlines. Adjacent delimiters collapse, every
    piece is trimmed and empty pieces are dropped. Order and duplicates are
    kept.

    Args:
        text: Raw text as pasted or read from a file

    Returns:
        List of non-empty trimmed tokens
    """
    if not text:
        return []

    pieces = TOKEN_DELIMITERS.split(text.replace("\r", "\n"))
    return [piece.strip() for piece in pieces if piece.strip()]
