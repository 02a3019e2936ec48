"""Reading input sources and writing disavow files.

Sources are decoded completely before anything reaches the pipeline.
Strict mode rejects bytes that are not valid UTF-8; lenient mode swaps
them for U+FFFD so the export check can flag them later.
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional

from disavowtui.core.exceptions import ExportError, SourceDecodeError, SourceReadError
from disavowtui.core.models import SourceText
from disavowtui.reporting.generator import default_export_name


logger = logging.getLogger(__name__)


def decode_source(data: bytes, name: str, *, strict_utf8: bool = False) -> SourceText:
    """Decode raw bytes of an uploaded source.

    Args:
        data: File contents
        name: Display name used in status lines and errors
        strict_utf8: Raise instead of replacing invalid bytes

    Returns:
        SourceText with the decoded text

    Raises:
        SourceDecodeError: If strict_utf8 is set and data is not valid UTF-8
    """
    if strict_utf8:
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"UTF-8 verification failed for {name}: {e.reason}")
            raise SourceDecodeError(name, e.reason) from e
        return SourceText(name=name, text=text, verified=True)

    return SourceText(name=name, text=data.decode("utf-8", errors="replace"))


def read_source(path: Path, *, strict_utf8: bool = False) -> SourceText:
    """Read and decode a source file.

    Raises:
        SourceReadError: If the file cannot be read
        SourceDecodeError: If strict_utf8 is set and decoding fails
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.warning(f"Failed to read {path}: {e}")
        raise SourceReadError(f"Failed to read {path.name}: {e}") from e

    return decode_source(data, path.name, strict_utf8=strict_utf8)


def resolve_export_path(destination: Optional[Path], today: Optional[date] = None) -> Path:
    """Resolve where a download goes.

    A directory (or None, meaning the working directory) gets the default
    dated file name; anything else is used as the file path.
    """
    if destination is None:
        return Path.cwd() / default_export_name(today)
    if destination.is_dir():
        return destination / default_export_name(today)
    return destination


def write_document(
    text: str,
    destination: Optional[Path] = None,
    today: Optional[date] = None,
) -> Path:
    """Write the disavow document as UTF-8.

    Args:
        text: Document built by build_preview
        destination: File or directory; None means the working directory
        today: Date used for the default file name

    Returns:
        Path that was written

    Raises:
        ExportError: If there is nothing to write or writing fails
    """
    if not text.strip():
        raise ExportError("Nothing to export")

    output_path = resolve_export_path(destination, today)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Failed to write {output_path}: {e}")
        raise ExportError(f"Failed to write {output_path}: {e}") from e

    return output_path
