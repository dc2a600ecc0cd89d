from typing import Callable, Dict, Optional

from ..config import AppConfig
from ..logging import IndentedLog
from ..runners.diagnostics import list_failures
from ..runners.events import EventSource, RunEvent
from ..runners.nodes import Stats
from . import colors, symbols
from .epilogue import write_epilogue
from .failure import Renderer, format_failure
from .junit import setup_junit_report_generation
from .ms import ms

class ConsoleReporter:
    """Turns the run's event stream into a nested, colorized transcript."""

    def __init__(self, source: EventSource, log: Optional[IndentedLog] = None,
                 cfg: Optional[AppConfig] = None, renderer: Renderer = list_failures):
        self.source = source
        self.cfg = cfg or AppConfig()
        self.log = log or IndentedLog(color=self.cfg.reporter.color)
        self.renderer = renderer
        self.junit = None
        self.handlers: Dict[RunEvent, Callable] = {
            RunEvent.START: self.on_start,
            RunEvent.HOOK_START: self.on_hook_start,
            RunEvent.HOOK_END: self.on_hook_end,
            RunEvent.TEST_START: self.on_test_start,
            RunEvent.SUITE_START: self.on_suite_start,
            RunEvent.PENDING: self.on_pending,
            RunEvent.PASS: self.on_pass,
            RunEvent.FAIL: self.on_fail,
            RunEvent.TEST_END: self.on_test_end,
            RunEvent.SUITE_END: self.on_suite_end,
            RunEvent.END: self.on_end,
        }
        for event, handler in self.handlers.items():
            source.on(event, handler)

        junit = self.cfg.junit
        if junit.enabled and junit.report_name:
            self.junit = setup_junit_report_generation(source, junit.report_name, junit.root_directory)

    def close(self) -> None:
        for event, handler in self.handlers.items():
            self.source.off(event, handler)

    def on_start(self) -> None:
        self.log.write("")

    def on_hook_start(self, hook) -> None:
        self.log.write("-> " + colors.suite(hook.title))
        self.log.indent(2)

    def on_hook_end(self, hook=None) -> None:
        self.log.indent(-2)

    def on_suite_start(self, suite) -> None:
        if not suite.root:
            self.log.write("-: " + colors.suite(suite.title))
        self.log.indent(2)

    def on_suite_end(self, suite=None) -> None:
        if self.log.indent(-2) == "":
            self.log.write()

    def on_test_start(self, test) -> None:
        self.log.write(f"-> {test.title}")
        self.log.indent(2)

    def on_test_end(self, test=None) -> None:
        self.log.indent(-2)

    def on_pending(self, test) -> None:
        # balanced by the test end event the runner emits right after
        self.log.write("-> " + colors.pending(test.title))
        self.log.indent(2)

    def on_pass(self, test) -> None:
        line = "- " + colors.pass_(f"{symbols.ok} pass")
        if test.speed != "fast":
            line += " " + colors.speed(test.speed, f"({ms(test.duration_ms or 0)})")
        self.log.write(line)

    def on_fail(self, node, err: Optional[BaseException] = None) -> None:
        if err is None:
            err = getattr(node, "err", None)
        body = format_failure(node, err, self.renderer)
        self.log.write(
            f"- {symbols.err} "
            + colors.fail(f'fail: "{node.full_title()}"')
            + "\n"
            + body
        )

    def on_end(self, stats: Stats) -> None:
        write_epilogue(self.log, stats)
