from typing import Any, Callable, List, Optional
import importlib
import logging
import time
from ..config import AppConfig
from .events import EventEmitter, RunEvent
from .nodes import Hook, Suite, Stats, Test

log = logging.getLogger(__name__)

def classify_speed(duration_ms: float, slow_ms: int) -> str:
    if duration_ms > slow_ms:
        return "slow"
    if duration_ms > slow_ms / 2:
        return "medium"
    return "fast"

def expect_equal(actual: Any, expected: Any, message: Optional[str] = None) -> None:
    """Assert equality; the raised error carries both values so failures can show a diff."""
    if actual == expected:
        return
    err = AssertionError(message or f"expected {actual!r} to equal {expected!r}")
    err.actual = actual
    err.expected = expected
    raise err

class TestRunner:
    """Walks a suite tree, runs hooks and tests, and emits a run event for every step."""

    __test__ = False

    def __init__(self, cfg: Optional[AppConfig] = None, emitter: Optional[EventEmitter] = None,
                 clock: Callable[[], float] = time.perf_counter):
        self.cfg = cfg or AppConfig()
        self.emitter = emitter or EventEmitter()
        self.clock = clock
        self.stats = Stats()

    def _load_suite_module(self, suite: str):
        name = suite if "." in suite else f"ftr_testkit.testsuites.{suite}"
        log.debug("loading suite module %s", name)
        return importlib.import_module(name)

    def load(self, suite: str) -> Suite:
        mod = self._load_suite_module(suite)
        return getattr(mod, "discover")()

    def discover(self, suite: str) -> List[Test]:
        found: List[Test] = []
        def walk(s: Suite):
            found.extend(s.tests)
            for child in s.suites:
                walk(child)
        walk(self.load(suite))
        return found

    # ---------- run ----------
    def run(self, root: Suite) -> Stats:
        self.stats = Stats()
        started = self.clock()
        self.emitter.emit(RunEvent.START)
        self._run_suite(root)
        self.stats.duration_ms = round((self.clock() - started) * 1000)
        log.info("run finished: %d passing, %d failing, %d pending",
                 self.stats.passes, self.stats.failures, self.stats.pending)
        self.emitter.emit(RunEvent.END, self.stats)
        return self.stats

    def _fail(self, node, err: BaseException) -> None:
        node.err = err
        self.stats.failures += 1
        self.stats.failed.append(node)
        self.emitter.emit(RunEvent.FAIL, node, err)

    def _run_hook(self, hook: Hook) -> bool:
        self.emitter.emit(RunEvent.HOOK_START, hook)
        try:
            hook.fn()
            return True
        except Exception as e:
            self._fail(hook, e)
            return False
        finally:
            self.emitter.emit(RunEvent.HOOK_END, hook)

    def _run_hooks(self, hooks: List[Hook]) -> bool:
        for hook in hooks:
            if not self._run_hook(hook):
                return False
        return True

    def _run_suite(self, suite: Suite) -> None:
        if not suite.root and suite.total() == 0:
            return
        self.emitter.emit(RunEvent.SUITE_START, suite)
        if self._run_hooks(suite.hooks["before all"]):
            if self._run_tests(suite):
                for child in suite.suites:
                    self._run_suite(child)
        self._run_hooks(suite.hooks["after all"])
        self.emitter.emit(RunEvent.SUITE_END, suite)

    def _ancestors(self, suite: Suite) -> List[Suite]:
        chain: List[Suite] = []
        while suite is not None:
            chain.insert(0, suite)
            suite = suite.parent
        return chain

    def _run_tests(self, suite: Suite) -> bool:
        chain = self._ancestors(suite)
        for test in suite.tests:
            if test.pending:
                self.stats.pending += 1
                self.emitter.emit(RunEvent.PENDING, test)
                self.emitter.emit(RunEvent.TEST_END, test)
                continue
            if not self._run_hooks([h for s in chain for h in s.hooks["before each"]]):
                return False
            self._run_test(test)
            if not self._run_hooks([h for s in reversed(chain) for h in s.hooks["after each"]]):
                return False
        return True

    def _run_test(self, test: Test) -> None:
        self.emitter.emit(RunEvent.TEST_START, test)
        started = self.clock()
        try:
            test.fn()
        except Exception as e:
            test.duration_ms = round((self.clock() - started) * 1000)
            self._fail(test, e)
        else:
            test.duration_ms = round((self.clock() - started) * 1000)
            test.speed = classify_speed(test.duration_ms, self.cfg.reporter.slow_ms)
            self.stats.passes += 1
            self.emitter.emit(RunEvent.PASS, test)
        self.emitter.emit(RunEvent.TEST_END, test)
