import datetime
import logging
import traceback
import xml.etree.ElementTree as ET
from typing import List, Optional, Tuple

from ..runners.events import EventSource, RunEvent
from ..runners.nodes import Stats
from ..utils.artifacts import junit_report_path

log = logging.getLogger(__name__)

def _seconds(duration_ms) -> str:
    return f"{(duration_ms or 0) / 1000:.3f}"

class JUnitReporter:
    """Second listener on the run's event stream; writes one XML file when the run ends."""

    def __init__(self, source: EventSource, report_name: str, root_directory: str = "."):
        self.source = source
        self.report_name = report_name
        self.root_directory = root_directory
        self.results: List[Tuple[str, object, Optional[BaseException]]] = []
        self.started = datetime.datetime.now()
        self.handlers = {
            RunEvent.START: self.on_start,
            RunEvent.PASS: lambda test: self.results.append(("passed", test, None)),
            RunEvent.PENDING: lambda test: self.results.append(("skipped", test, None)),
            RunEvent.FAIL: self.on_fail,
            RunEvent.END: self.on_end,
        }
        for event, handler in self.handlers.items():
            source.on(event, handler)

    def on_start(self) -> None:
        self.started = datetime.datetime.now()

    def on_fail(self, node, err: Optional[BaseException] = None) -> None:
        if err is None:
            err = getattr(node, "err", None)
        self.results.append(("failed", node, err))

    def on_end(self, stats: Stats) -> None:
        for event, handler in self.handlers.items():
            self.source.off(event, handler)
        path = junit_report_path(self.root_directory, self.report_name)
        self.build(stats).write(path, encoding="utf-8", xml_declaration=True)
        log.info("wrote JUnit report to %s", path)

    def build(self, stats: Stats) -> ET.ElementTree:
        failures = sum(1 for state, _, _ in self.results if state == "failed")
        skipped = sum(1 for state, _, _ in self.results if state == "skipped")
        counts = dict(time=_seconds(stats.duration_ms), tests=str(len(self.results)),
                      failures=str(failures), skipped=str(skipped))
        testsuites = ET.Element("testsuites", name=self.report_name, **counts)
        testsuite = ET.SubElement(testsuites, "testsuite", name=self.report_name,
                                  timestamp=self.started.isoformat(timespec="seconds"), **counts)
        for state, node, err in self.results:
            parent = node.parent.full_title() if node.parent is not None else ""
            classname = f"{self.report_name}.{parent}" if parent else self.report_name
            tc = ET.SubElement(testsuite, "testcase", name=node.full_title(), classname=classname,
                               time=_seconds(getattr(node, "duration_ms", None)))
            if state == "failed":
                failure = ET.SubElement(tc, "failure", message=str(err) if err is not None else "failed")
                if err is not None:
                    failure.text = "".join(traceback.format_exception(type(err), err, err.__traceback__))
            elif state == "skipped":
                ET.SubElement(tc, "skipped")
        return ET.ElementTree(testsuites)

def setup_junit_report_generation(source: EventSource, report_name: str, root_directory: str = ".") -> JUnitReporter:
    return JUnitReporter(source, report_name, root_directory)
