from ftr_testkit.runners.events import EventEmitter, RunEvent


def test_handlers_run_in_registration_order():
    emitter = EventEmitter()
    calls = []
    emitter.on(RunEvent.PASS, lambda t: calls.append(("a", t)))
    emitter.on(RunEvent.PASS, lambda t: calls.append(("b", t)))
    emitter.emit(RunEvent.PASS, "x")
    assert calls == [("a", "x"), ("b", "x")]


def test_off_removes_handler_and_ignores_unknown():
    emitter = EventEmitter()
    calls = []
    handler = calls.append
    emitter.on(RunEvent.START, lambda: calls.append("start"))
    emitter.on(RunEvent.END, handler)
    emitter.off(RunEvent.END, handler)
    emitter.off(RunEvent.FAIL, handler)
    emitter.emit(RunEvent.END, "stats")
    emitter.emit(RunEvent.START)
    assert calls == ["start"]


def test_handler_may_unsubscribe_itself():
    emitter = EventEmitter()
    calls = []

    def once(stats):
        calls.append(stats)
        emitter.off(RunEvent.END, once)

    emitter.on(RunEvent.END, once)
    emitter.on(RunEvent.END, lambda stats: calls.append("after"))
    emitter.emit(RunEvent.END, 1)
    emitter.emit(RunEvent.END, 2)
    assert calls == [1, "after", "after"]
