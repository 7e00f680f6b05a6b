import math
from dataclasses import dataclass, field, fields
from typing import Optional, Tuple, Dict, Any, List
from .items import ItemTree

@dataclass(frozen=True)
class ErrorInfo:
    """Error carried by a request, a script or a failed assertion."""
    message: str = ""
    name: Optional[str] = None
    type: Optional[str] = None
    stack: Optional[str] = None
    test: Optional[str] = None
    index: Optional[int] = None

    @property
    def trace(self) -> str:
        return self.stack if self.stack is not None else self.message

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

@dataclass(frozen=True)
class ScriptResult:
    error: Optional[ErrorInfo] = None

@dataclass(frozen=True)
class Assertion:
    name: str
    error: Optional[ErrorInfo] = None
    @property
    def passed(self) -> bool: return self.error is None

@dataclass(frozen=True)
class RequestInfo:
    method: str = "GET"
    url: str = ""
    body: Optional[str] = None

@dataclass(frozen=True)
class ResponseInfo:
    body: str = ""

@dataclass(frozen=True)
class ExecutionRecord:
    item_id: str
    iteration: int = 0
    request_error: Optional[ErrorInfo] = None
    test_scripts: Tuple[ScriptResult, ...] = ()
    prerequest_scripts: Tuple[ScriptResult, ...] = ()
    # None: the engine reported no assertion list at all
    assertions: Optional[Tuple[Assertion, ...]] = None
    request: RequestInfo = field(default_factory=RequestInfo)
    response: Optional[ResponseInfo] = None
    response_time_ms: Optional[float] = None

    @property
    def seconds(self) -> float:
        """Latency in seconds, 0 unless the execution carries a finite numeric timing."""
        ms = self.response_time_ms
        if isinstance(ms, bool) or not isinstance(ms, (int, float)) or not math.isfinite(ms):
            return 0
        return ms / 1000

@dataclass
class RunSummary:
    collection_name: str
    executions: List[ExecutionRecord]
    items: ItemTree
