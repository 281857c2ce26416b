"""
Console - The line-oriented text boundary.

Every prompt writes its text, then blocks for exactly one line. Streams
are injectable so tests can script input with io.StringIO.
"""

from __future__ import annotations
import logging
import sys
from typing import Iterable, TextIO

from ..errors import InputReadError, UserQuit

logger = logging.getLogger(__name__)


class Console:
    """
    Plain sequential text console.

    Usage:
        console = Console()
        console.write("You need to discard.")
        line = console.ask("Enter card number")
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.prompts_issued = 0

    def write(self, line: str = "") -> None:
        """Write one line."""
        self.stdout.write(line + "\n")

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write(line)

    def ask(self, prompt: str) -> str:
        """
        Write a prompt and read one line (without its newline).

        Raises UserQuit at end of input and InputReadError when the
        stream fails or the line cannot be decoded.
        """
        self.prompts_issued += 1
        self.stdout.write(prompt)
        self.stdout.flush()

        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(e)) from e

        if line == "":
            logger.info("End of input reached, treating as quit")
            raise UserQuit()

        return line.rstrip("\r\n")
