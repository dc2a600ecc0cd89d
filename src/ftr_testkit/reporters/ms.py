SECOND = 1000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR

def ms(value: float) -> str:
    """Render a millisecond duration the way mocha does, e.g. ``12ms``, ``1.5sec``."""
    if value >= DAY:
        return f"{round(value / DAY)}d"
    if value >= HOUR:
        return f"{round(value / HOUR)}h"
    if value >= MINUTE:
        return f"{value / MINUTE:.1f}min"
    if value >= SECOND:
        return f"{value / SECOND:.1f}sec"
    return f"{round(value)}ms"
