# utils/transcript.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Turn-by-turn transcript of a subject's interactions, with CSV export

import csv
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List, Tuple, Union

from utils.logger import get_logger

CSV_HEADERS = ["call", "stimulus", "reactions"]
REACTION_SEPARATOR = "|"


class TranscriptFormatError(Exception):
    """Exception raised when a transcript file has an invalid format."""

    pass


@dataclass(frozen=True, slots=True)
class TranscriptEntry:
    """One delivered input and the subject's reactions to it.

    Entries read back from CSV hold the string forms of the changes.
    """

    call: int
    stimulus: Any
    reactions: Tuple[Any, ...] = ()

    def __str__(self) -> str:
        shown = ", ".join(str(r) for r in self.reactions) or "(silent)"
        return f"#{self.call} {self.stimulus} → {shown}"


@dataclass
class Transcript:
    """Ordered record of every turn of a run."""

    entries: List[TranscriptEntry] = field(default_factory=list)

    def record(self, stimulus: Any, reactions: List[Any]) -> TranscriptEntry:
        entry = TranscriptEntry(len(self.entries) + 1, stimulus, tuple(reactions))
        self.entries.append(entry)
        return entry

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(self.entries)

    def write_csv(self, filepath: Union[str, Path]) -> None:
        """Write the transcript as CSV.

        Expected CSV format:
            call,stimulus,reactions
            1,Push(1),
            4,Pop,Value(3)|Value(2)

        Args:
            filepath: Destination file
        """
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADERS)
            for entry in self.entries:
                writer.writerow(
                    [
                        entry.call,
                        str(entry.stimulus),
                        REACTION_SEPARATOR.join(str(r) for r in entry.reactions),
                    ]
                )
        get_logger().debug(f"Wrote {len(self.entries)} transcript entries to {filepath}")


class RecordingSubject:
    """Wraps a subject and records every call into a transcript.

    The wrapped subject's reactions are returned unchanged, as a list.
    """

    def __init__(self, subject, transcript: Transcript = None):
        self.subject = subject
        self.transcript = transcript if transcript is not None else Transcript()
        self.__name__ = getattr(subject, "__name__", type(subject).__name__)

    def __call__(self, change):
        reactions = list(self.subject(change))
        self.transcript.record(change, reactions)
        return reactions


def read_transcript_csv(filepath: Union[str, Path]) -> Transcript:
    """Read a transcript written by ``Transcript.write_csv``.

    Args:
        filepath: Path to the CSV file

    Returns:
        Transcript whose entries carry the string forms of the changes

    Raises:
        TranscriptFormatError: If the file is missing or malformed
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise TranscriptFormatError(f"Transcript file not found: {filepath}")

    transcript = Transcript()
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)

        missing = set(CSV_HEADERS) - set(reader.fieldnames or [])
        if missing:
            raise TranscriptFormatError(f"Missing required headers: {sorted(missing)}")

        for row_num, row in enumerate(reader, start=2):
            try:
                call = int(row["call"])
            except (TypeError, ValueError):
                raise TranscriptFormatError(
                    f"Error parsing row {row_num}: bad call number {row['call']!r}"
                )
            if call != len(transcript) + 1:
                raise TranscriptFormatError(
                    f"Error parsing row {row_num}: expected call {len(transcript) + 1}, got {call}"
                )
            raw = row["reactions"] or ""
            reactions = tuple(r for r in raw.split(REACTION_SEPARATOR) if r)
            transcript.entries.append(TranscriptEntry(call, row["stimulus"], reactions))

    logger.debug(f"Read {len(transcript)} transcript entries from {filepath}")
    return transcript
