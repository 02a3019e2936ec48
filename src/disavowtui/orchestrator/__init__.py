"""Orchestrator module for pipeline execution.

This module provides the pure disavow pipeline and the session object
that callers use to hold flags, the greenlist and the last processed input
between runs.
"""

from disavowtui.orchestrator.pipeline import (
    build_exclusion_set,
    process,
    process_with_options,
)
from disavowtui.orchestrator.session import DisavowSession


__all__ = [
    # Pipeline
    "build_exclusion_set",
    "process",
    "process_with_options",
    # Session
    "DisavowSession",
]
