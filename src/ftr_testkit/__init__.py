# Lightweight package init: avoid eager imports that can fail at console start.
__all__ = ["ConsoleReporter", "TestRunner", "Suite"]

def __getattr__(name):
    if name == "ConsoleReporter":
        from .reporters.console import ConsoleReporter as _ConsoleReporter
        return _ConsoleReporter
    if name == "TestRunner":
        from .runners.runner import TestRunner as _TestRunner
        return _TestRunner
    if name == "Suite":
        from .runners.nodes import Suite as _Suite
        return _Suite
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
