"""CLI entrypoint for the SopsSecretGenerator kustomize plugin."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .errors import GeneratorError, find_decryption_error
from .generator import SecretGenerator
from .logging import configure_logging

_PROG = "SopsSecretGenerator"
_USAGE = f"usage: {_PROG} FILE\n"

EXIT_USAGE = 1
EXIT_FAILURE = 2


class _UsageParser(argparse.ArgumentParser):
    """Argument parser that reports bad invocations with exit code 1."""

    def error(self, message: str) -> NoReturn:
        self.exit(EXIT_USAGE, _USAGE)


def _build_parser() -> argparse.ArgumentParser:
    parser = _UsageParser(
        prog=_PROG,
        description="Generate a Kubernetes Secret from sops-encrypted sources.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write DEBUG logs for every pipeline stage to this file.",
    )
    parser.add_argument("file", help="Path to the SopsSecretGenerator descriptor.")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint; writes the generated Secret to stdout."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    generator = SecretGenerator()
    try:
        output = generator.process(args.file)
    except GeneratorError as exc:
        logger.debug("Generation failed: %s", exc)
        message = f"Error: {exc}\n"
        decryption_error = find_decryption_error(exc)
        if decryption_error is not None and decryption_error.user_detail:
            message += f"{decryption_error.user_detail}\n"
        parser.exit(EXIT_FAILURE, message)
    sys.stdout.write(output)


if __name__ == "__main__":
    main(sys.argv[1:])
