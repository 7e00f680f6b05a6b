"""
Reader for the run summary written by Newman's JSON reporter.

Only the fields the JUnit report needs are picked out of the summary;
everything else is ignored.
"""
from __future__ import annotations
import json, logging, pathlib
from typing import Any, Dict, List, Optional, Union
from urllib.parse import urlencode

from .items import ItemTree
from .records import (
    Assertion, ErrorInfo, ExecutionRecord, RequestInfo, ResponseInfo, RunSummary, ScriptResult,
)

log = logging.getLogger(__name__)

class RunSummaryError(ValueError):
    pass

# ---------- helpers ----------
def _error(data: Optional[Dict[str, Any]]) -> Optional[ErrorInfo]:
    if not data:
        return None
    if isinstance(data, str):
        return ErrorInfo(message=data)
    index = data.get("index")
    return ErrorInfo(
        message=str(data.get("message") or ""),
        name=data.get("name"),
        type=data.get("type"),
        stack=data.get("stack"),
        test=data.get("test"),
        index=index if isinstance(index, int) else None,
    )

def _scripts(data) -> tuple:
    return tuple(ScriptResult(error=_error(s.get("error"))) for s in data or () if isinstance(s, dict))

def render_url(url: Union[str, Dict[str, Any], None]) -> str:
    """Flatten a Postman URL object (protocol/host/path/query) into a string."""
    if url is None:
        return ""
    if isinstance(url, str):
        return url
    if url.get("raw"):
        return url["raw"]
    host = url.get("host") or []
    host = ".".join(host) if isinstance(host, list) else str(host)
    path = url.get("path") or []
    path = "/".join(path) if isinstance(path, list) else str(path).lstrip("/")
    out = f"{url['protocol']}://{host}" if url.get("protocol") else host
    if url.get("port"):
        out += f":{url['port']}"
    if path:
        out += "/" + path
    query = [(q.get("key"), q.get("value") or "") for q in url.get("query") or () if not q.get("disabled")]
    if query:
        out += "?" + urlencode(query)
    return out

def _body(body: Optional[Dict[str, Any]]) -> Optional[str]:
    if not body:
        return None
    mode = body.get("mode", "raw")
    if mode == "raw":
        return body.get("raw")
    if mode in ("urlencoded", "formdata"):
        pairs = [(p.get("key"), p.get("value") or "") for p in body.get(mode) or () if not p.get("disabled")]
        return urlencode(pairs)
    if mode == "graphql":
        return json.dumps(body.get("graphql"))
    return None

def _response_body(resp: Dict[str, Any]) -> str:
    stream = resp.get("stream")
    if isinstance(stream, dict) and isinstance(stream.get("data"), list):
        return bytes(stream["data"]).decode("utf-8", errors="replace")
    if isinstance(stream, str):
        return stream
    return str(resp.get("body") or "")

# ---------- parsing ----------
def parse_execution(data: Dict[str, Any]) -> ExecutionRecord:
    item = data.get("item") or {}
    item_id = item.get("id") or data.get("id")
    if not item_id:
        raise RunSummaryError("execution without an item id")
    req = data.get("request") or {}
    resp = data.get("response")
    response = None
    timing = None
    if isinstance(resp, dict):
        timing = resp.get("responseTime")
        response = ResponseInfo(body=_response_body(resp))
    assertions = data.get("assertions")
    if assertions is not None:
        assertions = tuple(Assertion(name=str(a.get("assertion")), error=_error(a.get("error"))) for a in assertions)
    return ExecutionRecord(
        item_id=str(item_id),
        iteration=int((data.get("cursor") or {}).get("iteration") or 0),
        request_error=_error(data.get("requestError")),
        test_scripts=_scripts(data.get("testScript")),
        prerequest_scripts=_scripts(data.get("prerequestScript")),
        assertions=assertions,
        request=RequestInfo(method=str(req.get("method") or "GET").upper(),
                            url=render_url(req.get("url")), body=_body(req.get("body"))),
        response=response,
        response_time_ms=timing,
    )

def _normalize_items(items) -> List[Dict[str, Any]]:
    out = []
    for it in items or ():
        out.append({
            "id": it.get("id") or it.get("_postman_id") or it.get("name"),
            "name": it.get("name"),
            "item": _normalize_items(it.get("item")),
        })
    return out

def parse_run_summary(data: Dict[str, Any]) -> RunSummary:
    if not isinstance(data, dict) or not isinstance(data.get("collection"), dict):
        raise RunSummaryError("run summary has no collection")
    coll = data["collection"]
    info = coll.get("info") or {}
    cid = info.get("_postman_id") or coll.get("id") or ""
    name = info.get("name") or coll.get("name") or cid
    tree = ItemTree.from_dicts(cid, name, _normalize_items(coll.get("item")))
    executions = [parse_execution(e) for e in (data.get("run") or {}).get("executions") or ()]
    log.debug("Parsed %d execution(s) for collection %r", len(executions), name)
    return RunSummary(collection_name=name, executions=executions, items=tree)

def load_run_summary(path: Union[str, pathlib.Path]) -> RunSummary:
    try:
        data = json.loads(pathlib.Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RunSummaryError(f"{path}: not valid JSON ({e})") from e
    return parse_run_summary(data)
