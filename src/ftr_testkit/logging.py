import logging
import sys
from typing import Optional, TextIO

from rich.logging import RichHandler
from rich.text import Text

def strip_ansi(text: str) -> str:
    # per line: the ansi decoder drops trailing empty lines
    return "\n".join(Text.from_ansi(part).plain for part in text.split("\n"))

def setup_logging(level: str = "INFO"):
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[RichHandler(rich_tracebacks=True)])
    return logging.getLogger("ftr_testkit")

class IndentedLog:
    """Line writer for the console transcript.

    Every written line is prefixed with the current indent. ``indent(delta)``
    shifts the indent and returns the new prefix; the indent never drops
    below zero.
    """

    def __init__(self, stream: Optional[TextIO] = None, color: bool = True):
        self.stream = stream or sys.stdout
        self.color = color
        self._level = 0

    @property
    def level(self) -> int:
        return self._level

    def indent(self, delta: int = 0) -> str:
        self._level = max(self._level + delta, 0)
        return " " * self._level

    def write(self, line: str = "") -> None:
        if not self.color:
            line = strip_ansi(line)
        if not line:
            self.stream.write("\n")
        else:
            prefix = " " * self._level
            self.stream.write("\n".join(prefix + part for part in line.split("\n")) + "\n")
        self.stream.flush()
