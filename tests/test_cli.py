"""
Tests for the dnapack command.
"""

import pytest
from dnapack.cli import build_parser, main


@pytest.fixture
def sequence_file(tmp_path):
    path = tmp_path / "sequence.txt"
    path.write_text("TACGATCTAG\nTCTAGGATC\n")
    return path


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """Test default pattern and flags."""
        args = build_parser().parse_args(["seq.txt"])
        assert args.pattern == "GCAT"
        assert args.circular is False
        assert args.pack is None

    def test_pack_arguments(self):
        """Test that --pack takes two integers."""
        args = build_parser().parse_args(["seq.txt", "--pack", "4", "7"])
        assert args.pack == [4, 7]


class TestMain:
    """Tests for running the command."""

    def test_summary_and_linear_search(self, sequence_file, capsys):
        """Test the default output."""
        assert main([str(sequence_file), "TCTA"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "TACGATCTAGTCTAGGATC"
        assert "Length: 19" in out
        assert "Composition: A=5 C=4 G=4 T=6" in out
        assert "GC content: 42.1%" in out
        assert "Pattern: TCTA (linear)" in out
        assert "Offsets: [5, 10]" in out

    def test_circular_search(self, sequence_file, capsys):
        """Test --circular."""
        assert main([str(sequence_file), "TCTA", "--circular"]) == 0
        out = capsys.readouterr().out
        assert "Pattern: TCTA (circular)" in out
        assert "Offsets: [5, 10, 17]" in out

    def test_pack_and_revcomp(self, sequence_file, capsys):
        """Test --pack and --revcomp output."""
        assert main([str(sequence_file), "--pack", "4", "7", "--revcomp"]) == 0
        out = capsys.readouterr().out
        assert "Packed [4, 11): 0x372C000000000000" in out
        assert "Reverse complement: GATCCTAGACTAGATCGTA" in out

    def test_pack_out_of_range(self, sequence_file, capsys):
        """Test that a rejected range is reported, not raised."""
        assert main([str(sequence_file), "--pack", "10", "20"]) == 0
        assert "Packed [10, 30): out of range" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        """Test that a load failure exits with status 1."""
        assert main([str(tmp_path / "missing.txt")]) == 1
        captured = capsys.readouterr()
        assert captured.err.startswith("error: Could not load sequence")
        assert captured.out == ""
