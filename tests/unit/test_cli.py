"""
Tests for the primkit command line.
"""

import json

import pytest

from primkit.app_shell.cli import main, parse_value

pytestmark = pytest.mark.cli


def run(capsys, *argv: str):
    main(list(argv))
    return capsys.readouterr().out


class TestParseValue:
    def test_json_literals(self) -> None:
        assert parse_value("10") == 10
        assert parse_value("[1, 2]") == [1, 2]
        assert parse_value('{"a": 1}') == {"a": 1}
        assert parse_value("true") is True

    def test_plain_text_stays_string(self) -> None:
        assert parse_value("hello-world") == "hello-world"


class TestCall:
    def test_positional_arguments(self, capsys) -> None:
        assert json.loads(run(capsys, "call", "numeric", "clamp", "10", "0", "5")) == 5

    def test_keyword_arguments(self, capsys) -> None:
        out = run(capsys, "call", "strings", "truncate", "Hello World", "8", "--kw", "suffix=~")
        assert json.loads(out) == "Hello W~"

    def test_list_result(self, capsys) -> None:
        out = run(capsys, "call", "validation", "password_policy_violations", "password")
        assert json.loads(out) == ["uppercase", "numbers"]

    def test_dates_accept_iso_strings(self, capsys) -> None:
        out = run(capsys, "call", "dates", "add_days", "2024-01-31", "1")
        assert json.loads(out) == "2024-02-01T00:00:00"

    def test_rules_file_applies_config(self, capsys, write_rules) -> None:
        path = write_rules("formatting:\n  locale: de-DE\n")
        out = run(capsys, "--rules", str(path), "call", "formatting", "format_number", "1234.5", "1")
        assert json.loads(out) == "1.234,5"

    def test_rules_skip_functions_without_config(self, capsys, write_rules) -> None:
        path = write_rules("formatting:\n  locale: de-DE\n")
        out = run(capsys, "--rules", str(path), "call", "formatting", "format_ordinal", "2")
        assert json.loads(out) == "2nd"

    def test_bad_arguments_exit_2(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["call", "numeric", "clamp", "1", "5", "0"])
        assert exc.value.code == 2

    def test_wrong_type_exit_2(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["call", "numeric", "clamp", "ten", "0", "5"])
        assert exc.value.code == 2

    def test_malformed_kw_exit_2(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["call", "strings", "truncate", "abc", "1", "--kw", "suffix"])
        assert exc.value.code == 2

    def test_unknown_component_exit_1(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["call", "geometry", "area"])
        assert exc.value.code == 1

    def test_unknown_function_exit_1(self) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["call", "numeric", "DEFAULT_CONFIG"])
        assert exc.value.code == 1


class TestOtherCommands:
    def test_list_all(self, capsys) -> None:
        out = run(capsys, "list")
        assert "numeric:" in out
        assert "  clamp" in out
        assert "encoding:" in out

    def test_list_one_component(self, capsys) -> None:
        out = run(capsys, "list", "arrays")
        assert out.startswith("arrays:")
        assert "numeric:" not in out

    def test_manifest(self, capsys) -> None:
        manifest = json.loads(run(capsys, "manifest"))
        assert "numeric" in manifest["components"]

    def test_check(self, capsys) -> None:
        assert "PASS" in run(capsys, "check")
