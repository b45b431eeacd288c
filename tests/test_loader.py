"""
Tests for loading sequences from files.
"""

import pytest
from dnapack.loader import read_sequence_text, load_sequence
from dnapack.sequence import Sequence, SequenceError, SequenceLoadError


class TestReadSequenceText:
    """Tests for read_sequence_text."""

    def test_reads_whole_file(self, tmp_path):
        """Test that the full content is returned."""
        path = tmp_path / "seq.txt"
        path.write_text("TACG\nATCT\n")
        assert read_sequence_text(path) == "TACG\nATCT\n"

    def test_accepts_str_path(self, tmp_path):
        """Test that a plain string path works."""
        path = tmp_path / "seq.txt"
        path.write_text("ACGT")
        assert read_sequence_text(str(path)) == "ACGT"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises SequenceLoadError."""
        path = tmp_path / "missing.txt"
        with pytest.raises(SequenceLoadError) as exc_info:
            read_sequence_text(path)
        assert exc_info.value.path == str(path)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
        assert isinstance(exc_info.value, SequenceError)

    def test_directory_is_not_readable(self, tmp_path):
        """Test that reading a directory raises SequenceLoadError."""
        with pytest.raises(SequenceLoadError):
            read_sequence_text(tmp_path)

    def test_undecodable_bytes(self, tmp_path):
        """Test that invalid UTF-8 raises SequenceLoadError."""
        path = tmp_path / "binary.txt"
        path.write_bytes(b"\xff\xfeACGT")
        with pytest.raises(SequenceLoadError) as exc_info:
            read_sequence_text(path)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


class TestLoadSequence:
    """Tests for load_sequence."""

    def test_load_multiline_file(self, tmp_path):
        """Test that line breaks are dropped."""
        path = tmp_path / "seq.txt"
        path.write_text("TACGATCTAG\nTCTAGGATC\n")
        assert load_sequence(path) == Sequence.from_symbols("TACGATCTAGTCTAGGATC")

    def test_load_skips_other_characters(self, tmp_path):
        """Test permissive parsing of file content."""
        path = tmp_path / "seq.txt"
        path.write_text("1 ACGT acgt\n61 TT\n")
        assert str(load_sequence(path)) == "ACGTTT"

    def test_load_empty_file(self, tmp_path):
        """Test that an empty file gives an empty sequence."""
        path = tmp_path / "empty.txt"
        path.write_text("")
        assert len(load_sequence(path)) == 0

    def test_load_with_encoding(self, tmp_path):
        """Test reading with an explicit encoding."""
        path = tmp_path / "seq.txt"
        path.write_bytes("GATC".encode("utf-16"))
        assert str(load_sequence(path, encoding="utf-16")) == "GATC"
