"""Caller-owned state around the pure disavow pipeline.

DisavowSession keeps what the interactive front ends need between runs:
the current flags, the raw input buffer, the last processed text, the
greenlist and a one-line status. The pipeline itself stays stateless;
every rerun is triggered explicitly by a session method.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

from disavowtui.core.constants import STATUS_MESSAGES, StatusKind
from disavowtui.core.exceptions import SourceDecodeError, SourceError
from disavowtui.core.models import AppSettings, PipelineResult, ProcessOptions, SourceText
from disavowtui.orchestrator.pipeline import build_exclusion_set, process_with_options
from disavowtui.reporting.generator import build_preview, is_utf8_safe
from disavowtui.storage.artifacts import read_source


logger = logging.getLogger(__name__)

# (total, output) -> status line
StatusBuilder = Callable[[int, int], str]


class DisavowSession:
    """Interactive disavow session.

    Example:
        >>> session = DisavowSession()
        >>> result = session.format("https://Spammy.com/offer\\nspammy.com")
        >>> result.filtered
        ['domain:spammy.com']
    """

    def __init__(self, settings: Optional[AppSettings] = None) -> None:
        self.settings = settings or AppSettings()
        self.reset()

    def reset(self) -> None:
        """Return every field to the configured defaults."""
        self.dedupe = self.settings.dedupe
        self.skip_non_url = self.settings.skip_non_url
        self.utf8_check = self.settings.utf8_check
        self.comment = self.settings.comment
        self.raw_input = ""
        self.source_name: Optional[str] = None
        self.last_processed: Optional[str] = None
        self.greenlist: frozenset[str] = frozenset()
        self.greenlist_label: Optional[str] = None
        self.result = PipelineResult.empty()
        self.status = ""
        self.status_kind = StatusKind.INFO

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def options(self) -> ProcessOptions:
        return ProcessOptions(dedupe=self.dedupe, skip_non_url=self.skip_non_url)

    @property
    def preview(self) -> str:
        """Export document: comment line followed by one domain per line."""
        return build_preview(self.comment, self.result.filtered)

    @property
    def utf8_safe(self) -> bool:
        return not self.utf8_check or is_utf8_safe(self.preview)

    @property
    def can_export(self) -> bool:
        return bool(self.preview.strip()) and self.utf8_safe

    # ------------------------------------------------------------------
    # Pipeline runs
    # ------------------------------------------------------------------

    def format(self, raw_text: Optional[str] = None) -> PipelineResult:
        """Process the given text, or the input buffer, and remember it.

        Args:
            raw_text: Text to process; defaults to the current raw input

        Returns:
            Result of the run
        """
        source = self.raw_input if raw_text is None else raw_text

        if not source.strip():
            self.last_processed = None
            return self._run("")

        self.last_processed = source
        return self._run(source)

    def rerun(self, status: Optional[StatusBuilder] = None) -> Optional[PipelineResult]:
        """Reprocess the last formatted text with the current state.

        Returns:
            The new result, or None if nothing was formatted yet
        """
        if self.last_processed is None:
            return None
        return self._run(self.last_processed, status)

    def set_dedupe(self, enabled: bool) -> Optional[PipelineResult]:
        self.dedupe = enabled

        def status(total: int, output: int) -> str:
            if enabled:
                return STATUS_MESSAGES["dedupe_on"].format(output=output, total=total)
            return STATUS_MESSAGES["dedupe_off"].format(output=output)

        return self.rerun(status)

    def set_skip_non_url(self, enabled: bool) -> Optional[PipelineResult]:
        self.skip_non_url = enabled

        def status(total: int, output: int) -> str:
            if enabled:
                return STATUS_MESSAGES["skip_on"].format(output=output, total=total)
            return STATUS_MESSAGES["skip_off"].format(output=output)

        return self.rerun(status)

    def _run(self, source: str, status: Optional[StatusBuilder] = None) -> PipelineResult:
        if not source.strip():
            self.result = PipelineResult.empty()
            self.set_status(STATUS_MESSAGES["nothing"])
            return self.result

        self.result = process_with_options(source, self.options, self.greenlist)
        total, output = self.result.total, self.result.output_count

        if status is not None:
            self.set_status(status(total, output))
        elif total == 0:
            self.set_status(STATUS_MESSAGES["nothing"])
        else:
            self.set_status(STATUS_MESSAGES["trimmed"].format(total=total, output=output))

        return self.result

    # ------------------------------------------------------------------
    # Greenlist
    # ------------------------------------------------------------------

    def load_greenlist(self, raw_text: str, label: Optional[str] = None) -> frozenset[str]:
        """Replace the greenlist wholesale. Does not reprocess.

        Args:
            raw_text: Greenlist text; every entry is canonicalized
            label: File name or description shown next to the count

        Returns:
            The new greenlist
        """
        entries = build_exclusion_set(raw_text)
        self.greenlist = entries
        self.greenlist_label = label

        logger.info(f"Greenlist replaced: {len(entries)} domains ({label or 'no label'})")

        if entries:
            self.set_status(STATUS_MESSAGES["greenlist_loaded"].format(count=len(entries)))
        else:
            self.set_status(STATUS_MESSAGES["greenlist_empty"])

        return entries

    def apply_greenlist(self, raw_text: str, label: Optional[str] = None) -> Optional[PipelineResult]:
        """Load a greenlist, then reprocess the last formatted text."""
        entries = self.load_greenlist(raw_text, label)

        def status(total: int, output: int) -> str:
            key = "greenlist_applied" if entries else "greenlist_cleared"
            return STATUS_MESSAGES[key].format(output=output, total=total)

        return self.rerun(status)

    def apply_greenlist_paste(self, raw_text: str) -> Optional[PipelineResult]:
        if not raw_text.strip():
            self.set_status(STATUS_MESSAGES["greenlist_paste_missing"])
            return None
        return self.apply_greenlist(raw_text, "Pasted greenlist")

    def clear_greenlist(self) -> Optional[PipelineResult]:
        return self.apply_greenlist("", None)

    # ------------------------------------------------------------------
    # Sources
    # ------------------------------------------------------------------

    def append_source(self, source: SourceText) -> None:
        """Append decoded file text to the input buffer."""
        self.raw_input = "\n".join(part for part in (self.raw_input, source.text) if part)
        self.source_name = source.name

        if source.verified:
            self.set_status(
                STATUS_MESSAGES["source_verified"].format(name=source.name),
                StatusKind.SUCCESS,
            )
        else:
            self.set_status(STATUS_MESSAGES["source_loaded"].format(name=source.name))

    def load_input_file(self, path: Path) -> bool:
        """Read a file into the input buffer.

        Decode and read failures become an error status; the buffer and the
        last result are left untouched.

        Returns:
            True if the file was appended
        """
        try:
            source = read_source(path, strict_utf8=self.utf8_check)
        except SourceDecodeError:
            self.source_name = None
            self.set_status(
                STATUS_MESSAGES["source_decode_failed"].format(name=path.name),
                StatusKind.ERROR,
            )
            return False
        except SourceError:
            self.source_name = None
            self.set_status(
                STATUS_MESSAGES["source_read_failed"].format(name=path.name),
                StatusKind.ERROR,
            )
            return False

        self.append_source(source)
        return True

    def load_greenlist_file(self, path: Path) -> bool:
        """Read a greenlist file and apply it.

        Returns:
            True if the greenlist was replaced
        """
        try:
            source = read_source(path, strict_utf8=self.utf8_check)
        except SourceError:
            self.set_status(
                STATUS_MESSAGES["source_read_failed"].format(name=path.name),
                StatusKind.ERROR,
            )
            return False

        self.apply_greenlist(source.text, source.name)
        return True

    def set_status(self, message: str, kind: StatusKind = StatusKind.INFO) -> None:
        self.status = message
        self.status_kind = kind
