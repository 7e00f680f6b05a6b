# Lightweight package init: the CLI pulls in typer/rich, the library does not need them.
__all__ = ["ReportAggregator", "JUnitReporter", "load_run_summary"]

def __getattr__(name):
    if name == "ReportAggregator":
        from .reporters.aggregate import ReportAggregator as _ReportAggregator
        return _ReportAggregator
    if name == "JUnitReporter":
        from .reporters.junit import JUnitReporter as _JUnitReporter
        return _JUnitReporter
    if name == "load_run_summary":
        from .runs.newman import load_run_summary as _load_run_summary
        return _load_run_summary
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
