from ..logging import IndentedLog
from ..runners.nodes import Stats
from . import colors
from .ms import ms

def write_epilogue(log: IndentedLog, stats: Stats) -> None:
    log.write()
    log.write(f"{colors.pass_(f'{stats.passes} passing')} ({ms(stats.duration_ms)})")
    if stats.pending:
        log.write(colors.pending(f"{stats.pending} pending"))
    if stats.failures:
        log.write(colors.fail(f"{stats.failures} failing"))
        for i, node in enumerate(stats.failed, 1):
            log.write(f"  {i}) {node.full_title()}")
    log.write()
