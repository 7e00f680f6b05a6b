"""Shared builders for run summaries and execution records."""

from __future__ import annotations

import pytest

from newman_junit.runs.items import CollectionItem, ItemTree
from newman_junit.runs.records import (
    Assertion,
    ErrorInfo,
    ExecutionRecord,
    RequestInfo,
    ResponseInfo,
    RunSummary,
)


def make_execution(item_id: str, iteration: int = 0, ms=None, passed=(), failed=None, **kw) -> ExecutionRecord:
    """Execution with passing assertion names and ``{name: message}`` failures."""
    assertions = [Assertion(n) for n in passed]
    for name, message in (failed or {}).items():
        assertions.append(Assertion(name, ErrorInfo(message=message, name="AssertionError")))
    if "assertions" not in kw:
        kw["assertions"] = tuple(assertions)
    if ms is not None and "response" not in kw:
        kw["response"] = ResponseInfo(body="{}")
    return ExecutionRecord(item_id=item_id, iteration=iteration, response_time_ms=ms, **kw)


@pytest.fixture
def tree() -> ItemTree:
    root = CollectionItem("c1", "API")
    users = root.add(CollectionItem("f1", "Users"))
    users.add(CollectionItem("r1", "Get user"))
    users.add(CollectionItem("r2", "Create user"))
    root.add(CollectionItem("r3", None))
    return ItemTree(root)


@pytest.fixture
def run(tree: ItemTree) -> RunSummary:
    return RunSummary(
        collection_name="API",
        executions=[
            make_execution("r1", 0, 100, passed=["status code is 200"]),
            make_execution("r1", 1, 300, failed={"status code is 200": "expected 200 got 500"}),
        ],
        items=tree,
    )


@pytest.fixture
def post_request() -> RequestInfo:
    return RequestInfo(method="POST", url="https://api.example.com/users", body='{"name":"ada"}')
