# tests/utils_tests/test_transcript.py
# This file is part of Tribunal - A cause-effect conformance harness
#
# Test suite for transcript recording and CSV export

"""Test suite for interaction transcripts."""

import pytest
from core import judge
from scenarios.stack import SCENARIO_1, Pop, Push, StackArbiter, Value
from scenarios.subjects import mirror_stack, zero_smart
from utils.transcript import (
    RecordingSubject,
    Transcript,
    TranscriptEntry,
    TranscriptFormatError,
    read_transcript_csv,
)


class TestRecordingSubject:
    """Test cases for the recording wrapper."""

    def test_01_records_every_call(self):
        subject = RecordingSubject(mirror_stack())
        outcome = judge(StackArbiter(SCENARIO_1), subject)

        assert len(subject.transcript) == outcome.calls == 7
        assert [e.call for e in subject.transcript] == list(range(1, 8))
        assert subject.transcript.entries[3] == TranscriptEntry(4, Pop(), (Value(3),))

    def test_02_reactions_pass_through_unchanged(self):
        subject = RecordingSubject(mirror_stack())
        assert subject(Push(5)) == []
        assert subject(Pop()) == [Value(5)]

    def test_03_shared_transcript(self):
        transcript = Transcript()
        subject = RecordingSubject(zero_smart(), transcript)
        judge(StackArbiter(SCENARIO_1), subject)
        assert transcript.entries[-1] == TranscriptEntry(4, Pop(), (Value(0),))

    def test_04_keeps_subject_name(self):
        assert RecordingSubject(mirror_stack()).__name__ == "mirror_stack"

    def test_05_entry_string_form(self):
        assert str(TranscriptEntry(2, Push(1))) == "#2 Push(1) → (silent)"
        assert str(TranscriptEntry(4, Pop(), (Value(3),))) == "#4 Pop → Value(3)"


class TestTranscriptCsv:
    """Test cases for CSV export and import."""

    def test_01_round_trip_keeps_string_forms(self, tmp_path):
        transcript = Transcript()
        transcript.record(Push(1), [])
        transcript.record(Pop(), [Value(1), Value(None)])
        path = tmp_path / "run.csv"

        transcript.write_csv(path)
        loaded = read_transcript_csv(path)

        assert [str(e) for e in loaded] == [str(e) for e in transcript]
        assert loaded.entries[1].reactions == ("Value(1)", "Value(None)")

    def test_02_file_layout(self, tmp_path):
        transcript = Transcript()
        transcript.record(Pop(), [Value(3), Value(2)])
        path = tmp_path / "run.csv"
        transcript.write_csv(path)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines == ["call,stimulus,reactions", "1,Pop,Value(3)|Value(2)"]

    def test_03_missing_file(self, tmp_path):
        with pytest.raises(TranscriptFormatError, match="not found"):
            read_transcript_csv(tmp_path / "missing.csv")

    def test_04_missing_headers(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("call,stimulus\n1,Pop\n", encoding="utf-8")
        with pytest.raises(TranscriptFormatError, match="Missing required headers"):
            read_transcript_csv(path)

    @pytest.mark.parametrize("call", ["x", "2"])
    def test_05_bad_call_numbers(self, tmp_path, call):
        path = tmp_path / "bad.csv"
        path.write_text(f"call,stimulus,reactions\n{call},Pop,\n", encoding="utf-8")
        with pytest.raises(TranscriptFormatError, match="row 2"):
            read_transcript_csv(path)
