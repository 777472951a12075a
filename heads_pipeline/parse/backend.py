"""External constituency parser adapters."""

from __future__ import annotations

import shlex
import shutil
import subprocess
from typing import List, Optional, Protocol, Sequence, Union


class ConstituentParser(Protocol):
    def parse(self, tokens: Sequence[str], num_parses: int = 1) -> List[str]:
        """Ranked Penn bracket strings for one tokenized sentence, best first."""
        ...


class CommandLineParser:
    """Runs an external parser once per sentence.

    The tokens are written space-separated to the process's stdin; the process
    must print one bracketed tree per line, best parse first.
    """

    def __init__(self, command: Union[str, Sequence[str]], timeout_sec: Optional[float] = None) -> None:
        self.command = self._resolve_command(command)
        self.timeout_sec = timeout_sec

    @staticmethod
    def _resolve_command(command: Union[str, Sequence[str]]) -> List[str]:
        argv = shlex.split(command) if isinstance(command, str) else list(command)
        if not argv:
            raise ValueError("parser_command must not be empty")
        path = shutil.which(argv[0])
        if path is None:
            raise FileNotFoundError(f"parser binary not found: {argv[0]}")
        return [path, *argv[1:]]

    def parse(self, tokens: Sequence[str], num_parses: int = 1) -> List[str]:
        if num_parses < 1:
            raise ValueError(f"num_parses must be >= 1, got: {num_parses}")
        sentence = " ".join(tokens).strip()
        if not sentence:
            return []
        try:
            proc = subprocess.run(
                self.command,
                input=sentence + "\n",
                capture_output=True,
                text=True,
                check=True,
                timeout=self.timeout_sec,
            )
        except subprocess.CalledProcessError as exc:
            raise RuntimeError(f"parser exited with status {exc.returncode}: {exc.stderr.strip()[:200]}") from exc
        trees = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
        if not trees:
            raise RuntimeError(f"parser returned no tree for: {sentence[:80]!r}")
        return trees[:num_parses]
