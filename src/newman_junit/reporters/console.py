from typing import Iterable
from .aggregate import SuiteSummary

class ConsoleReporter:
    def emit(self, suites: Iterable[SuiteSummary]) -> None:
        for s in suites:
            status = "ERROR" if s.errored else ("FAIL" if s.failures else "PASS")
            print(f"Suite: {s.name} [{status}] tests={s.tests} failures={s.failures} time={s.time:.3f}s")
            for c in s.cases:
                print(f" - {c.name}: {'FAIL' if c.failed else 'PASS'}")
