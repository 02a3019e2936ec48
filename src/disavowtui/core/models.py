"""Core data models for DisavowTUI.

This module defines the data structures passed between the pipeline, the
session and the collaborator layers: per-run options, pipeline results,
decoded sources and user settings.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from disavowtui.core.constants import DEFAULTS


# ============================================================================
# Pipeline Models
# ============================================================================

@dataclass(frozen=True)
class ProcessOptions:
    """Flags passed explicitly into every pipeline run."""
    dedupe: bool = True
    skip_non_url: bool = True


@dataclass(frozen=True)
class PipelineResult:
    """Outcome of a single pipeline run.

    ``cleaned`` holds canonical domains after dedupe but before the
    exclusion set is applied; ``filtered`` is ``cleaned`` minus the
    exclusion set, in the same order.
    """
    total: int
    cleaned: list[str] = field(default_factory=list)
    filtered: list[str] = field(default_factory=list)

    @property
    def output_count(self) -> int:
        """Number of domains left for export."""
        return len(self.filtered)

    @property
    def excluded_count(self) -> int:
        """Number of domains removed by the exclusion set."""
        return len(self.cleaned) - len(self.filtered)

    @classmethod
    def empty(cls) -> "PipelineResult":
        return cls(total=0, cleaned=[], filtered=[])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "cleaned": list(self.cleaned),
            "filtered": list(self.filtered),
            "output": self.output_count,
            "excluded": self.excluded_count,
        }


# ============================================================================
# Source Model
# ============================================================================

@dataclass(frozen=True)
class SourceText:
    """Fully decoded text of an input or greenlist file."""
    name: str
    text: str
    verified: bool = False                  # Decoded as strict UTF-8


# ============================================================================
# Settings Model
# ============================================================================

@dataclass
class AppSettings:
    """User preferences loaded from the YAML config file."""
    comment: str = DEFAULTS["comment"]
    dedupe: bool = DEFAULTS["dedupe"]
    skip_non_url: bool = DEFAULTS["skip_non_url"]
    utf8_check: bool = DEFAULTS["utf8_check"]
    theme: str = DEFAULTS["theme"]
    download_dir: Optional[Path] = DEFAULTS["download_dir"]
    log_level: str = DEFAULTS["log_level"]
    log_file: Optional[Path] = DEFAULTS["log_file"]

    @property
    def options(self) -> ProcessOptions:
        return ProcessOptions(dedupe=self.dedupe, skip_non_url=self.skip_non_url)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a YAML-friendly dictionary."""
        return {
            "comment": self.comment,
            "dedupe": self.dedupe,
            "skip_non_url": self.skip_non_url,
            "utf8_check": self.utf8_check,
            "theme": self.theme,
            "download_dir": str(self.download_dir) if self.download_dir else None,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }
