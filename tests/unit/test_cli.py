"""Tests for the bn command line."""

import pytest

from bn.cli import build_parser, main


class TestCli:
    """Tests for main()."""

    @pytest.mark.parametrize(
        "argv,expected",
        [
            (["add", "0.1", "0.2"], "0.3"),
            (["add", "5"], "5"),
            (["sub", "10", "2.5", "0.5"], "7"),
            (["mul", "1.234", "1.234"], "1.522756"),
            (["parse", "1e-10"], "0.0000000001"),
            (["round", "2.5"], "3"),
            (["floor", "--", "-2.5"], "-3"),
            (["ceil", "2.1"], "3"),
            (["trunc", "--", "-2.9"], "-2"),
            (["neg", "4"], "-4"),
            (["abs", "--", "-4"], "4"),
            (["not", "5"], "-6"),
            (["cmp", "--", "-5", "3"], "-1"),
            (["cmp", "--ignore-sign", "--", "-5", "3"], "1"),
        ],
    )
    def test_commands(self, argv, expected, capsys):
        assert main(argv) == 0
        assert capsys.readouterr().out == expected + "\n"

    def test_invalid_literal_exits_nonzero(self, capsys):
        assert main(["add", "1", "abc"]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Invalid Bn" in captured.err

    def test_unknown_command_exits(self):
        with pytest.raises(SystemExit):
            main(["divide", "1", "2"])

    def test_cmp_requires_two_operands(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["cmp", "1"])
