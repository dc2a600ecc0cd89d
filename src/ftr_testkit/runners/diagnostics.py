"""Flat failure listing, the runner's own diagnostic printer.

The output is meant for a top-level list of failures: each entry is numbered,
the error message is red and the traceback gray. The color codes wrap the
leading whitespace of each block, which is what terminals expect for a flat
list but not for nested transcripts.
"""
import difflib
import traceback
from typing import Iterable, Optional, TextIO, Tuple

import typer

def _message(err: Optional[BaseException]) -> str:
    if err is None:
        return "failed"
    text = str(err)
    name = type(err).__name__
    return f"{name}: {text}" if text else name

def _stack(err: Optional[BaseException]) -> str:
    if err is None:
        return ""
    lines = "".join(traceback.format_tb(err.__traceback__)).rstrip("\n")
    return "\n".join(f"  {line}" for line in lines.split("\n")) if lines else ""

def _diff(err: BaseException) -> str:
    actual, expected = getattr(err, "actual"), getattr(err, "expected")
    if not isinstance(actual, str) or not isinstance(expected, str):
        actual, expected = repr(actual), repr(expected)
    out = ["", "      " + typer.style("+ expected", fg="green") + " " + typer.style("- actual", fg="red"), ""]
    for line in difflib.ndiff(actual.splitlines(), expected.splitlines()):
        tag, text = line[:2], line[2:]
        if tag == "- ":
            out.append("      " + typer.style(f"-{text}", fg="red"))
        elif tag == "+ ":
            out.append("      " + typer.style(f"+{text}", fg="green"))
        elif tag == "  ":
            out.append(f"       {text}")
    return "\n".join(out) + "\n"

def list_failures(failures: Iterable[Tuple[object, Optional[BaseException]]], out: TextIO) -> None:
    """Write a numbered listing of failed (node, error) pairs to ``out``.

    Nodes are tests or hooks. A missing error is listed as plain ``failed``.
    """
    out.write("\n")
    for i, (node, err) in enumerate(failures, 1):
        out.write(f"  {i}) {node.full_title()}:\n")
        out.write(typer.style(f"     {_message(err)}", fg="red"))
        if hasattr(err, "actual") and hasattr(err, "expected"):
            out.write(_diff(err))
        out.write(typer.style(f"\n{_stack(err)}\n", fg="bright_black"))
        out.write("\n")
