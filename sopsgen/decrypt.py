"""Decryption oracle backed by the sops command-line tool."""

from __future__ import annotations

import subprocess
from typing import Callable, Iterable, Protocol, Sequence

from .config import DEFAULT_SOPS_EXECUTABLE
from .errors import DecryptionError
from .formats import Format
from .logging import get_logger

_STDIN_PATH = "/dev/stdin"


class Decryptor(Protocol):
    """Turns possibly-encrypted bytes into plaintext given a format hint."""

    def decrypt(self, content: bytes, fmt: Format) -> bytes:
        """Return the plaintext or raise DecryptionError."""


class SopsDecryptor:
    """Runs ``sops --decrypt`` with the payload piped through stdin."""

    def __init__(
        self,
        executable: str = DEFAULT_SOPS_EXECUTABLE,
        *,
        runner: Callable[..., bytes] | None = None,
    ) -> None:
        self.executable = executable
        self._runner = runner or self._default_runner
        self.logger = get_logger("decrypt")

    def decrypt(self, content: bytes, fmt: Format) -> bytes:
        args = self.command(fmt)
        self.logger.debug("Running %s", " ".join(args))
        try:
            return self._runner(args, stdin=content)
        except FileNotFoundError as exc:
            raise DecryptionError(
                f"unable to locate '{self.executable}'",
                user_detail="Install sops or set SOPSGEN_SOPS_EXECUTABLE to its path.",
            ) from exc
        except subprocess.CalledProcessError as exc:
            detail = _decode_stderr(exc.stderr)
            raise DecryptionError(
                f"sops failed to decrypt {fmt.sops_type} data (exit code {exc.returncode})",
                user_detail=detail or None,
            ) from exc

    def command(self, fmt: Format) -> Sequence[str]:
        """Return the sops argument vector for the given format."""
        return [
            self.executable,
            "--decrypt",
            "--input-type",
            fmt.sops_type,
            "--output-type",
            fmt.sops_type,
            _STDIN_PATH,
        ]

    @staticmethod
    def _default_runner(args: Iterable[str], *, stdin: bytes) -> bytes:
        completed = subprocess.run(
            list(args),
            input=stdin,
            check=True,
            capture_output=True,
        )
        return completed.stdout


def _decode_stderr(stderr: bytes | str | None) -> str:
    if stderr is None:
        return ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip()


__all__ = ["Decryptor", "SopsDecryptor"]
