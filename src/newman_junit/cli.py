from typing import Optional
import typer
from pydantic import ValidationError
from .config import load_config, AppConfig
from .logging import setup_logging
from .runs.newman import load_run_summary, RunSummaryError
from .reporters.junit import JUnitReporter
from .reporters.console import ConsoleReporter
from .utils.artifacts import write_export

app = typer.Typer(add_completion=False, help="newman-junit - JUnit XML reports from Newman run summaries")

def _config(path: Optional[str]) -> AppConfig:
    if not path:
        return AppConfig()
    try:
        return load_config(path)
    except ValidationError as e:
        typer.echo(f"Invalid config {path}:\n{e}", err=True)
        raise typer.Exit(code=2)

def _load(summary: str):
    try:
        return load_run_summary(summary)
    except (OSError, RunSummaryError) as e:
        typer.echo(f"Cannot read run summary: {e}", err=True)
        raise typer.Exit(code=2)

@app.command()
def report(
    summary: str = typer.Argument(..., help="Run summary written by newman's JSON reporter"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
    export: Optional[str] = typer.Option(None, "--export", "-e", help="Write the XML report to this path"),
    out_dir: str = typer.Option(".", "--out", "-o", help="Directory relative export paths resolve against"),
    fail_on_error: bool = typer.Option(False, "--fail-on-error", help="Exit 1 when any suite failed or errored"),
):
    cfg = _config(config)
    log = setup_logging(cfg.log_level)
    if export:
        cfg.reporter.export = export
    run = _load(summary)

    reporter = JUnitReporter(cfg.reporter)
    suites = reporter.suites(run)
    result = reporter.emit(run, suites)
    if result is None:
        typer.echo("Nothing to report: the run has no executions.")
        raise typer.Exit(code=0)
    path = write_export(result, out_dir)
    log.info("Wrote %s", path)

    ConsoleReporter().emit(suites)
    bad = [s for s in suites if s.failures or s.errored]
    typer.echo(f"Done. {len(suites)} suites, {len(bad)} with failures or errors.")
    raise typer.Exit(code=1 if fail_on_error and bad else 0)

@app.command()
def summary(
    summary: str = typer.Argument(..., help="Run summary written by newman's JSON reporter"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config YAML"),
):
    cfg = _config(config)
    setup_logging(cfg.log_level)
    run = _load(summary)
    suites = JUnitReporter(cfg.reporter).suites(run)
    if not suites:
        typer.echo("Nothing to report.")
    ConsoleReporter().emit(suites)

def main():
    app()
