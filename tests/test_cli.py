from __future__ import annotations

import json
import textwrap
from pathlib import Path

from bujo_outline import __version__
from bujo_outline.cli import cli

JOURNAL = """
── Monday, Jan 27 ──
. Buy groceries
  - Milk
  - Bread
. !!! Send report
>[friday] Review PR
"""


def _write_pyproject(base: Path, body: str) -> Path:
    path = base / "pyproject.toml"
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_cli_version(cli_runner):
    result = cli_runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_check_valid_journal(cli_runner, write_journal, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = write_journal(JOURNAL)

    result = cli_runner.invoke(cli, ["check", target.name])

    assert result.exit_code == 0
    assert result.output == "today.bujo: OK (5 entries)\n"


def test_check_reports_errors_with_line_numbers(cli_runner, write_journal, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = write_journal(
        """
        . Fine
        ^ Unknown
        .
        """
    )

    result = cli_runner.invoke(cli, ["check", target.name])

    assert result.exit_code == 1
    assert result.output.splitlines() == [
        "today.bujo:2: Unknown entry type",
        "today.bujo:3: Entry content required",
        "today.bujo: 2 error(s)",
    ]


def test_check_json_output(cli_runner, write_journal):
    target = write_journal(". !! Task\n  ^ bad")

    result = cli_runner.invoke(cli, ["check", "--format", "json", str(target)])

    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload["is_valid"] is False
    assert payload["errors"] == [{"line_number": 2, "message": "Unknown entry type"}]
    assert payload["lines"][0] == {
        "line_number": 1,
        "kind": "entry",
        "depth": 0,
        "symbol": "task",
        "priority": 2,
        "content": "Task",
        "migration_target": None,
        "error": None,
    }
    assert payload["lines"][1]["kind"] == "invalid"
    assert payload["lines"][1]["depth"] == 1


def test_check_reads_output_format_from_config(cli_runner, write_journal, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.bujo-outline]
        output_format = "json"
        """,
    )
    target = write_journal(". Task\n")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code == 0
    assert json.loads(result.output)["is_valid"] is True


def test_check_flag_overrides_config(cli_runner, write_journal, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.bujo-outline]
        output_format = "json"
        """,
    )
    target = write_journal(". Task\n")

    result = cli_runner.invoke(cli, ["check", "--format", "text", str(target)])

    assert result.exit_code == 0
    assert result.output.endswith("OK (1 entries)\n")


def test_check_rejects_invalid_config(cli_runner, write_journal, tmp_path):
    _write_pyproject(
        tmp_path,
        """
        [tool.bujo-outline]
        surprise = 1
        """,
    )
    target = write_journal(". Task\n")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code == 2
    assert "Invalid `[tool.bujo-outline]` settings" in result.output


def test_check_rejects_unsupported_extension(cli_runner, write_journal):
    target = write_journal(". Task\n", name="notes.csv")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code != 0
    assert "not a journal file" in result.output


def test_check_enforces_file_size_limit(cli_runner, write_journal, monkeypatch):
    monkeypatch.setenv("BUJO_OUTLINE_MAX_FILE_SIZE", "10")
    target = write_journal(". " + "x" * 20 + "\n")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code == 1
    assert "maximum allowed size" in result.output


def test_check_enforces_line_length_limit(cli_runner, write_journal, monkeypatch):
    monkeypatch.setenv("BUJO_OUTLINE_MAX_LINE_LENGTH", "5")
    target = write_journal(". short\n")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code == 1
    assert "maximum allowed length of 5" in result.output


def test_check_rejects_bad_environment_limit(cli_runner, write_journal, monkeypatch):
    monkeypatch.setenv("BUJO_OUTLINE_MAX_LINE_LENGTH", "lots")
    target = write_journal(". Task\n")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code == 1
    assert "BUJO_OUTLINE_MAX_LINE_LENGTH" in result.output


def test_folds_lists_every_range(cli_runner, write_journal):
    target = write_journal(
        """
        . Root
          . Mid
            . Leaf
        . Other
        """
    )

    result = cli_runner.invoke(cli, ["folds", str(target)])

    assert result.exit_code == 0
    assert result.output == "1-3\n2-3\n"


def test_folds_single_line(cli_runner, write_journal):
    target = write_journal(JOURNAL)

    result = cli_runner.invoke(cli, ["folds", "--line", "2", str(target)])

    assert result.exit_code == 0
    assert result.output == "2-4\n"


def test_folds_line_without_children(cli_runner, write_journal):
    target = write_journal(JOURNAL)

    result = cli_runner.invoke(cli, ["folds", "--line", "5", str(target)])

    assert result.exit_code == 1
    assert "Line 5 has nothing to fold." in result.output


def test_folds_line_out_of_range(cli_runner, write_journal):
    target = write_journal(". Task")

    result = cli_runner.invoke(cli, ["folds", "--line", "9", str(target)])

    assert result.exit_code == 2
    assert "has 1 line(s)" in result.output


def test_find_prints_location(cli_runner, write_journal):
    target = write_journal(". Parent\n  . Child task\n")

    result = cli_runner.invoke(cli, ["find", str(target), "Child"])

    assert result.exit_code == 0
    assert result.output == "2:9:23\t  . Child task\n"


def test_find_without_match(cli_runner, write_journal):
    target = write_journal(". Parent\n")

    result = cli_runner.invoke(cli, ["find", str(target), "missing"])

    assert result.exit_code == 1
    assert "No entry matching 'missing'." in result.output


def test_fmt_prints_canonical_document(cli_runner, write_journal):
    target = write_journal(".Buy milk\n\t-!!note\n   >[mon]Call\n^ keep me\n")

    result = cli_runner.invoke(cli, ["fmt", str(target)])

    assert result.exit_code == 0
    assert result.output == ". Buy milk\n  - !!note\n    > [mon] Call\n^ keep me\n"


def test_fmt_does_not_modify_file(cli_runner, write_journal):
    target = write_journal(".Buy milk\n")

    cli_runner.invoke(cli, ["fmt", str(target)])

    assert target.read_text(encoding="utf-8") == ".Buy milk\n"


def test_debug_logging_goes_to_output_stream(cli_runner, write_journal, monkeypatch):
    monkeypatch.setenv("BUJO_OUTLINE_LOG_LEVEL", "DEBUG")
    target = write_journal(". Task\n")

    result = cli_runner.invoke(cli, ["check", str(target)])

    assert result.exit_code == 0
    assert "document_parsed" in result.output
