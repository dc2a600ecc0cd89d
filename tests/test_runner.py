import pytest

from ftr_testkit.config import AppConfig
from ftr_testkit.runners.events import RunEvent
from ftr_testkit.runners.nodes import Suite
from ftr_testkit.runners.runner import TestRunner, classify_speed, expect_equal


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms / 1000


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def runner(emitter, clock):
    return TestRunner(AppConfig(), emitter, clock)


def _events(recorded):
    return [event for event, _ in recorded]


@pytest.mark.parametrize("duration, speed", [(10, "fast"), (37, "fast"), (38, "medium"), (75, "medium"), (76, "slow")])
def test_classify_speed(duration, speed):
    assert classify_speed(duration, 75) == speed


def test_expect_equal_carries_values():
    expect_equal(1, 1)
    with pytest.raises(AssertionError) as info:
        expect_equal([1], [2])
    assert info.value.actual == [1]
    assert info.value.expected == [2]


def test_event_order_for_simple_tree(runner, recorded):
    root = Suite.create_root()
    login = root.describe("Login")
    login.before_each(lambda: None)
    login.it("succeeds", lambda: None)
    runner.run(root)
    assert _events(recorded) == [
        RunEvent.START,
        RunEvent.SUITE_START,
        RunEvent.SUITE_START,
        RunEvent.HOOK_START,
        RunEvent.HOOK_END,
        RunEvent.TEST_START,
        RunEvent.PASS,
        RunEvent.TEST_END,
        RunEvent.SUITE_END,
        RunEvent.SUITE_END,
        RunEvent.END,
    ]
    assert recorded[1][1][0] is root
    assert recorded[-1][1][0] is runner.stats


def test_pending_is_followed_by_test_end(runner, recorded):
    root = Suite.create_root()
    root.it("later")
    root.xit("skipped", lambda: None)
    stats = runner.run(root)
    events = _events(recorded)
    assert RunEvent.TEST_START not in events
    assert events.count(RunEvent.PENDING) == 2
    for i, event in enumerate(events):
        if event is RunEvent.PENDING:
            assert events[i + 1] is RunEvent.TEST_END
    assert stats.pending == 2


def test_durations_and_speed(runner, clock):
    root = Suite.create_root()
    fast = root.it("fast", lambda: clock.advance(5))
    medium = root.it("medium", lambda: clock.advance(50))
    slow = root.it("slow", lambda: clock.advance(200))
    stats = runner.run(root)
    assert (fast.duration_ms, fast.speed) == (5, "fast")
    assert (medium.duration_ms, medium.speed) == (50, "medium")
    assert (slow.duration_ms, slow.speed) == (200, "slow")
    assert stats.duration_ms == 255
    assert stats.passes == 3


def test_failures_are_data(runner, recorded):
    root = Suite.create_root()
    suite = root.describe("Math")

    def wrong():
        expect_equal(1 + 1, 3)

    bad = suite.it("adds", wrong)
    suite.it("still runs", lambda: None)
    stats = runner.run(root)
    assert stats.failures == 1
    assert stats.passes == 1
    assert stats.failed == [bad]
    assert isinstance(bad.err, AssertionError)
    fail = [payload for event, payload in recorded if event is RunEvent.FAIL]
    assert fail == [(bad, bad.err)]


def test_failing_before_all_skips_suite_but_runs_after_all(runner, recorded):
    root = Suite.create_root()
    suite = root.describe("Broken")
    calls = []

    def boom():
        raise RuntimeError("no db")

    hook = suite.before_all(boom)
    suite.after_all(lambda: calls.append("after"))
    suite.it("never", lambda: calls.append("test"))
    suite.describe("child").it("never either", lambda: calls.append("child"))
    stats = runner.run(root)

    assert hook.title == '"before all" hook: boom'
    assert calls == ["after"]
    assert stats.failed == [hook]
    events = _events(recorded)
    i = events.index(RunEvent.FAIL)
    assert events[i - 1] is RunEvent.HOOK_START
    assert events[i + 1] is RunEvent.HOOK_END
    assert RunEvent.TEST_START not in events


def test_each_hooks_run_outermost_first_then_innermost_first(runner):
    root = Suite.create_root()
    calls = []
    outer = root.describe("outer")
    inner = outer.describe("inner")
    outer.before_each(lambda: calls.append("outer before"))
    inner.before_each(lambda: calls.append("inner before"))
    inner.after_each(lambda: calls.append("inner after"))
    outer.after_each(lambda: calls.append("outer after"))
    inner.it("t", lambda: calls.append("test"))
    runner.run(root)
    assert calls == ["outer before", "inner before", "test", "inner after", "outer after"]


def test_empty_suites_are_skipped(runner, recorded):
    root = Suite.create_root()
    root.describe("empty").describe("still empty")
    runner.run(root)
    assert _events(recorded) == [RunEvent.START, RunEvent.SUITE_START, RunEvent.SUITE_END, RunEvent.END]


def test_load_and_discover_bundled_example():
    runner = TestRunner()
    root = runner.load("example")
    assert root.root
    titles = [t.full_title() for t in runner.discover("example")]
    assert "Login succeeds" in titles
    assert "Dashboard panels keep their order" in titles


def test_load_unknown_suite():
    with pytest.raises(ModuleNotFoundError):
        TestRunner().load("does_not_exist")
