# utils/__init__.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Utility module exports

from .logger import LogLevel, configure_logging, get_logger, set_log_level
from .transcript import (
    RecordingSubject,
    Transcript,
    TranscriptEntry,
    TranscriptFormatError,
    read_transcript_csv,
)

__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "set_log_level",
    "RecordingSubject",
    "Transcript",
    "TranscriptEntry",
    "TranscriptFormatError",
    "read_transcript_csv",
]
