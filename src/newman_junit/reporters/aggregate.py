"""
Aggregation of a run's executions into per-item suite summaries.

Executions are grouped by the collection item that produced them. Each group
is folded into a ``SuiteSummary``: assertion outcomes merged by assertion
name, a mean response time, and an error narrative built from request and
script errors. The transform is pure; XML lives in ``reporters.junit``.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from ..runs.items import CollectionItem, ItemTree, SEP
from ..runs.records import ErrorInfo, ExecutionRecord, ScriptResult

log = logging.getLogger(__name__)

DELIM = "\n---\n"

@dataclass
class TestCaseSummary:
    name: str
    failures: List[ErrorInfo] = field(default_factory=list)
    __test__ = False  # not a pytest class

    @property
    def failed(self) -> bool: return bool(self.failures)

@dataclass
class SuiteSummary:
    name: str
    id: str
    tests: int = 0
    time: float = 0
    error: Optional[str] = None
    cases: List[TestCaseSummary] = field(default_factory=list)
    # timing of the group's last execution; every <testcase> reports this value
    last_time: float = 0

    @property
    def failures(self) -> int: return sum(len(c.failures) for c in self.cases)
    @property
    def errored(self) -> bool: return self.error is not None

class _GroupFold:
    """Accumulator for one item's executions, fed in iteration order."""

    def __init__(self, item: CollectionItem, name: str, bodyless: Tuple[str, ...]):
        self.item = item
        self.name = name
        self.bodyless = bodyless
        self.tests = 0
        self.times: List[float] = []
        self.narrative: Optional[str] = None
        self.cases: Dict[str, List[ErrorInfo]] = {}

    def feed(self, execution: ExecutionRecord) -> "_GroupFold":
        segment = self._narrate(execution)
        if segment is not None:
            self.narrative = segment if self.narrative is None else self.narrative + segment

        for assertion in execution.assertions or ():
            if assertion.error is not None:
                self.cases.setdefault(assertion.name, []).append(assertion.error)
            else:
                # a pass never clears failures recorded by earlier iterations
                self.cases.setdefault(assertion.name, [])

        # last execution wins, counts are not summed across iterations
        self.tests = len(execution.assertions) if execution.assertions is not None else 0
        self.times.append(execution.seconds)
        return self

    def _narrate(self, execution: ExecutionRecord) -> Optional[str]:
        errored = False
        msg = f"Iteration: {execution.iteration}\n"
        if execution.request_error is not None:
            errored = True
            msg += f"RequestError: {execution.request_error.trace}\n"
        msg += DELIM
        phases: Sequence[Tuple[str, Iterable[ScriptResult]]] = (
            ("testScript", execution.test_scripts),
            ("prerequestScript", execution.prerequest_scripts),
        )
        for phase, results in phases:
            for result in results:
                if result.error is None:
                    continue
                errored = True
                msg += self._script_error(phase, result.error, execution)
        return msg if errored else None

    def _script_error(self, phase: str, err: ErrorInfo, execution: ExecutionRecord) -> str:
        req = execution.request
        lines = [
            f"{phase}Error: {err.trace}{DELIM}",
            f"Error Type: {_s(err.type)}\n",
            f"Error Name: {_s(err.name)}\n",
            f"Error Message: {_s(err.message)}{DELIM}",
            f"Request URL: {req.url}\n",
            f"Request Type: {req.method}\n",
        ]
        if req.method.upper() not in self.bodyless:
            lines.append(f"Request Body: {_s(req.body)}\n")
        if execution.response is not None:
            lines.append(f"Response Body: {_s(execution.response.body)}\n")
        return "".join(lines)

    def summary(self) -> SuiteSummary:
        mean = _running_total(self.times) / len(self.times) if self.times else 0
        return SuiteSummary(
            name=self.name,
            id=self.item.id,
            tests=self.tests,
            time=mean,
            error=self.narrative,
            cases=[TestCaseSummary(n, f) for n, f in self.cases.items()],
            last_time=self.times[-1] if self.times else 0,
        )

def _s(value) -> str:
    return "" if value is None else str(value)

def _running_total(values: Iterable[float]) -> float:
    # plain left-to-right addition; sum() compensates rounding on 3.12+
    total = 0
    for v in values:
        total += v
    return total

def group_by_item(executions: Iterable[ExecutionRecord]) -> Dict[str, List[ExecutionRecord]]:
    groups: Dict[str, List[ExecutionRecord]] = {}
    for ex in executions:
        groups.setdefault(ex.item_id, []).append(ex)
    return groups

class ReportAggregator:
    def __init__(self, separator: str = SEP, bodyless_methods: Iterable[str] = ("GET",)):
        self.separator = separator
        self.bodyless = tuple(m.upper() for m in bodyless_methods)

    def full_name(self, item: CollectionItem) -> str:
        return ItemTree.full_name(item, self.separator)

    def fold_group(self, item: CollectionItem, executions: Iterable[ExecutionRecord]) -> SuiteSummary:
        acc = _GroupFold(item, self.full_name(item), self.bodyless)
        for ex in executions:
            acc.feed(ex)
        return acc.summary()

    def aggregate(self, executions: Optional[Iterable[ExecutionRecord]], items: ItemTree) -> List[SuiteSummary]:
        suites: List[SuiteSummary] = []
        for item_id, group in group_by_item(executions or ()).items():
            item = items.find(item_id)
            if item is None:
                log.debug("Dropping %d execution(s) for unknown item %s", len(group), item_id)
                continue
            suites.append(self.fold_group(item, group))
        return suites

    @staticmethod
    def total_time(suites: Iterable[SuiteSummary]) -> float:
        # additive over suite means, not a grand mean
        return _running_total(s.time for s in suites)
