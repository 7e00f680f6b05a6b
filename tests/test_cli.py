import json
import xml.etree.ElementTree as ET
from pathlib import Path

from typer.testing import CliRunner

from newman_junit.cli import app

DATA = Path(__file__).parent / "data" / "newman-summary.json"

runner = CliRunner()


def test_report_writes_default_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["report", str(DATA), "--out", str(tmp_path)])
    assert result.exit_code == 0, result.output
    report = tmp_path / "newman-run-report.xml"
    root = ET.parse(report).getroot()
    assert root.get("name") == "Users API"
    assert [s.get("name") for s in root.findall("testsuite")] == [
        "Users API / Users / Get user",
        "Users API / Users / Create user",
    ]
    create = root.findall("testsuite")[1]
    assert "RequestError: Error: connect ECONNREFUSED" in create.find("error").text
    assert 'Request Body: {"name":"ada"}' in create.find("error").text
    assert "Suite: Users API / Users / Get user [FAIL]" in result.output


def test_report_export_override_and_fail_on_error(tmp_path: Path) -> None:
    out = tmp_path / "custom" / "junit.xml"
    result = runner.invoke(app, ["report", str(DATA), "--export", str(out), "--fail-on-error"])
    assert result.exit_code == 1
    assert out.is_file()


def test_report_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("reporter:\n  export: from-config.xml\n  separator: ' > '\n")
    result = runner.invoke(app, ["report", str(DATA), "-c", str(cfg), "-o", str(tmp_path)])
    assert result.exit_code == 0, result.output
    root = ET.parse(tmp_path / "from-config.xml").getroot()
    assert root.find("testsuite").get("name") == "Users API > Users > Get user"


def test_report_nothing_to_do(tmp_path: Path) -> None:
    empty = tmp_path / "empty.json"
    empty.write_text(json.dumps({"collection": {"info": {"name": "E"}}, "run": {"executions": []}}))
    result = runner.invoke(app, ["report", str(empty), "-o", str(tmp_path)])
    assert result.exit_code == 0
    assert "Nothing to report" in result.output
    assert not (tmp_path / "newman-run-report.xml").exists()


def test_bad_inputs(tmp_path: Path) -> None:
    result = runner.invoke(app, ["report", str(tmp_path / "missing.json")])
    assert result.exit_code == 2
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("reporter:\n  bodyless_methods: 3\n")
    result = runner.invoke(app, ["report", str(DATA), "-c", str(cfg)])
    assert result.exit_code == 2


def test_summary_command() -> None:
    result = runner.invoke(app, ["summary", str(DATA)])
    assert result.exit_code == 0, result.output
    assert "Suite: Users API / Users / Create user [ERROR]" in result.output
    assert " - status code is 200: FAIL" in result.output
