"""CLI parser and entrypoint behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffold.analyzers import TREE_SITTER_AVAILABLE
from scaffold.cli import _build_parser, format_message, main


def test_cli_accepts_path_and_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["components/user_card.js", "--verbose", "--dry-run", "--root", "app"])
    assert args.path == "components/user_card.js"
    assert args.verbose is True
    assert args.dry_run is True
    assert args.root == "app"


def test_cli_path_is_optional_for_the_parser() -> None:
    args = _build_parser().parse_args([])
    assert args.path is None
    assert args.config is None


def test_format_message_adds_blank_lines() -> None:
    assert format_message("done") == "\ndone\n\n"


def test_missing_path_reports_plain_message(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--root", str(tmp_path)])

    assert excinfo.value.code == 1
    assert "\nFilepath argument is required!\n" in capsys.readouterr().err


def test_invalid_config_is_reported(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / ".scaffold.yml").write_text("- not a mapping\n", encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["component.js", "--root", str(tmp_path)])

    assert "must contain a mapping" in capsys.readouterr().err


@pytest.mark.skipif(
    not TREE_SITTER_AVAILABLE, reason="tree_sitter_languages not installed"
)
def test_main_prints_summary(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "components" / "user_card.js"
    source.parent.mkdir()
    source.write_text(
        "export const UserCard = ({ name }) => <div>{name}</div>;\n"
        "UserCard.propTypes = { name: PropTypes.string.isRequired };\n",
        encoding="utf-8",
    )

    main([str(source), "--root", str(tmp_path)])

    out = capsys.readouterr().out
    tests_dir = source.parent / "__tests__"
    assert out == (
        "\nSuccessfully created the following test files for UserCard:\n"
        f"  * {tests_dir / 'user_card.test_cases.js'}\n"
        f"  * {tests_dir / 'user_card.test.js'}\n\n"
    )
    assert (tests_dir / "user_card.test.js").is_file()


@pytest.mark.skipif(
    not TREE_SITTER_AVAILABLE, reason="tree_sitter_languages not installed"
)
def test_dry_run_prints_modules_without_writing(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "badge.js"
    source.write_text("export default function Badge() {\n  return <span />;\n}\n", encoding="utf-8")

    main([str(source), "--root", str(tmp_path), "--dry-run"])

    out = capsys.readouterr().out
    assert "props: {} // could not find prop type declarations" in out
    assert "describe('<Badge>', () => {" in out
    assert not (tmp_path / "__tests__").exists()
