"""Tests for the passgen command-line interface."""

from unittest.mock import patch

import pytest

from passgen import SPECIAL
from passgen.cli import main


# ── generate ───────────────────────────────────────────────────────────────


class TestGenerateCommand:
    def test_default(self, capsys):
        assert main(["generate"]) == 0
        line = capsys.readouterr().out.splitlines()[0]
        pwd = line.split()[0]
        assert len(pwd) == 12

    def test_count_and_length(self, capsys):
        assert main(["generate", "-n", "20", "-c", "3"]) == 0
        out = capsys.readouterr().out
        # message lines are indented further than password lines
        lines = [line for line in out.splitlines() if not line.startswith("    ")]
        assert len(lines) == 3
        assert all(len(line.split()[0]) == 20 for line in lines)

    def test_no_special(self, capsys):
        main(["generate", "-n", "32", "--no-special"])
        pwd = capsys.readouterr().out.split()[0]
        assert not set(pwd) & set(SPECIAL)

    def test_digits_only(self, capsys):
        main(["generate", "--no-uppercase", "--no-lowercase", "--no-special"])
        pwd = capsys.readouterr().out.split()[0]
        assert pwd.isdigit()

    def test_no_classes(self, capsys):
        argv = ["generate", "--no-uppercase", "--no-lowercase", "--no-digits", "--no-special"]
        assert main(argv) == 1
        assert "at least one character class" in capsys.readouterr().err

    @pytest.mark.parametrize("length", ["7", "33", "abc"])
    def test_length_out_of_range(self, length):
        with pytest.raises(SystemExit):
            main(["generate", "-n", length])

    @pytest.mark.parametrize("count", ["0", "-2"])
    @patch("passgen.reveal.pyperclip.copy")
    def test_count_must_be_positive(self, mock_copy, count, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["generate", "-c", count, "--copy"])
        assert exc.value.code == 2
        assert "count must be at least 1" in capsys.readouterr().err
        mock_copy.assert_not_called()

    @patch("passgen.reveal.pyperclip.copy")
    def test_copy(self, mock_copy, capsys):
        assert main(["generate", "--copy"]) == 0
        out = capsys.readouterr().out
        pwd = out.split()[0]
        mock_copy.assert_called_once_with(pwd)
        assert "Copied to clipboard." in out

    @patch("passgen.reveal.time.sleep")
    def test_animate(self, mock_sleep, capsys):
        assert main(["generate", "-n", "8", "--animate"]) == 0
        assert mock_sleep.call_count == 8
        assert "\r" in capsys.readouterr().out


# ── check ──────────────────────────────────────────────────────────────────


class TestCheckCommand:
    def test_strong_password(self, capsys):
        assert main(["check", "Tr0ub4dor&3xyzLongEnough"]) == 0
        out = capsys.readouterr().out
        assert "[######] Strong" in out
        assert "proper password" in out

    def test_weak_password_fails(self, capsys):
        assert main(["check", "password123"]) == 1
        assert "Very Weak" in capsys.readouterr().out

    def test_from_file(self, tmp_path, capsys):
        f = tmp_path / "passwords.txt"
        f.write_text("Xkcd-Horse9\n\nXy!456Zw\n")
        assert main(["check", "-f", str(f)]) == 0
        out = capsys.readouterr().out
        assert "'Xkcd-Horse9'" in out
        assert "'Xy!456Zw'" in out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["check", "-f", str(tmp_path / "nope.txt")]) == 1
        assert "cannot read" in capsys.readouterr().err

    def test_no_passwords(self, capsys):
        assert main(["check"]) == 1
        assert "provide passwords" in capsys.readouterr().err


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out
