from __future__ import annotations
import json, logging
from decimal import Decimal
from typing import List, Optional
from ..config import ReporterConfig, DEFAULT_REPORT
from ..runs.records import RunSummary, ErrorInfo
from ..utils.artifacts import Export
from ..utils.xmldoc import DocumentBuilder, Document, Node
from .aggregate import ReportAggregator, SuiteSummary

log = logging.getLogger(__name__)

EXPORT_NAME = "newman-junit"

def js_number(value) -> str:
    """Render a number the way JavaScript's Number#toString does (0.2, 3, 1e-7)."""
    if isinstance(value, int):
        return str(value)
    v = float(value)
    if v.is_integer() and abs(v) < 1e21:
        return str(int(v))
    r = repr(v)
    if abs(v) >= 1e-6 and abs(v) < 1e21:
        return format(Decimal(r), "f")
    mantissa, _, exp = r.partition("e")
    e = int(exp)
    return f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

def failure_object(err: ErrorInfo) -> str:
    return json.dumps(err.to_dict(), separators=(",", ":"), ensure_ascii=False)

class JUnitReporter:
    def __init__(self, config: Optional[ReporterConfig] = None):
        self.config = config or ReporterConfig()
        self.aggregator = ReportAggregator(self.config.separator, self.config.bodyless_methods)

    def suites(self, run: RunSummary) -> List[SuiteSummary]:
        return self.aggregator.aggregate(run.executions, run.items)

    def build(self, run: RunSummary, suites: Optional[List[SuiteSummary]] = None) -> Optional[Document]:
        """Document for ``run``; ``suites`` skips aggregation when already computed."""
        if not run.executions:
            return None
        if suites is None:
            suites = self.suites(run)
        name = self.config.collection_name or run.collection_name
        doc = DocumentBuilder.create("testsuites", {"version": "1.0", "encoding": "UTF-8", "name": name})
        for s in suites:
            self._suite(doc.root, s)
        doc.root.set("time", js_number(ReportAggregator.total_time(suites)))
        log.debug("Built %d suite(s) from %d execution(s)", len(suites), len(run.executions))
        return doc

    def _suite(self, root: Node, s: SuiteSummary) -> None:
        suite = root.element("testsuite", {"name": s.name, "id": s.id, "tests": s.tests, "time": js_number(s.time)})
        if s.error is not None:
            suite.element("error").cdata(s.error)
        for case in s.cases:
            tc = suite.element("testcase", {"name": case.name, "time": js_number(s.last_time)})
            for fail in case.failures:
                tc.element("failure", {"type": "AssertionFailure", "message": fail.message,
                                       "object": failure_object(fail)})

    def render(self, run: RunSummary, suites: Optional[List[SuiteSummary]] = None) -> Optional[str]:
        doc = self.build(run, suites)
        return doc.serialize(indent=self.config.indent) if doc is not None else None

    def emit(self, run: RunSummary, suites: Optional[List[SuiteSummary]] = None) -> Optional[Export]:
        """Produce the report export once a run is complete; None when nothing ran."""
        content = self.render(run, suites)
        if content is None:
            log.info("No executions recorded, skipping JUnit report")
            return None
        return Export(name=EXPORT_NAME, default=DEFAULT_REPORT, path=self.config.export, content=content)
