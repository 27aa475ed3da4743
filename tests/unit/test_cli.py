"""
Unit tests for the command line example.
"""

from organisationsnummer.cli import main


class TestCli:
    """Tests for the organisationsnummer command."""

    def test_valid_number(self, capsys):
        assert main(["202100-5489"]) == 0
        out = capsys.readouterr().out
        assert "20202100-5489" in out
        assert "valid: True" in out

    def test_sole_proprietor(self, capsys):
        assert main(["121212-1212"]) == 0
        assert "Enskild firma" in capsys.readouterr().out

    def test_invalid_number(self, capsys):
        assert main(["123456-7890"]) == 1
        assert "valid: False" in capsys.readouterr().out
