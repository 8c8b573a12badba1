"""CLI entrypoint for scaffolding component snapshot tests."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .errors import ScaffoldError
from .logging import configure_logging
from .orchestrator import Orchestrator, ScaffoldResult


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scaffold-tests",
        description="Generate prop fixtures and snapshot tests for a UI component.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to the component source file.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root used to locate the spy helper and .scaffold.yml (defaults to current directory).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a configuration file (defaults to <root>/.scaffold.yml).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the generated modules instead of writing them.",
    )
    return parser


def format_message(message: str) -> str:
    """Surround ``message`` with a blank line above and below."""
    return f"\n{message}\n\n"


def success_message(result: ScaffoldResult) -> str:
    paths = result.record.paths
    return "\n".join(
        [
            f"Successfully created the following test files for {paths.identifier_name}:",
            f"  * {paths.fixture_file_path}",
            f"  * {paths.test_file_path}",
        ]
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for scaffold-tests."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose))

    root = Path(args.root)
    try:
        config = load_config(Path(args.config) if args.config else root)
        orchestrator = Orchestrator(root=root, config=config)
        result = orchestrator.run(args.path, dry_run=bool(args.dry_run))
    except (ScaffoldError, ConfigError, OSError) as exc:
        parser.exit(1, format_message(str(exc)))

    if args.dry_run:
        paths = result.record.paths
        print(f"--- {paths.fixture_file_path} (dry-run)")
        print(result.fixture_text)
        print(f"--- {paths.test_file_path} (dry-run)")
        print(result.test_text)
        return
    print(format_message(success_message(result)), end="")


if __name__ == "__main__":
    main(sys.argv[1:])
