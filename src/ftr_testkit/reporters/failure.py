import io
import re
from typing import Callable, Iterable, Optional, TextIO

from ..runners.diagnostics import list_failures

Renderer = Callable[[Iterable, TextIO], None]

# one or more color escapes followed by the whitespace they were wrapped around
LEADING_COLORS = re.compile(r"^((?:\x1b\[[0-9;]*m)+)(\s+)")

def format_failure(node, err: Optional[BaseException] = None, renderer: Renderer = list_failures) -> str:
    """Reshape the runner's flat failure listing so it nests under a ``fail:`` line.

    The renderer writes into a private buffer. Its first two lines (a blank
    line and the numbered title) repeat what the caller already printed and
    are dropped. Errors from the renderer are not caught.
    """
    buf = io.StringIO()
    renderer([(node, err)], buf)
    lines = buf.getvalue().split("\n")[2:]
    return "\n".join(" " + LEADING_COLORS.sub(r"\2\1", line) for line in lines)
