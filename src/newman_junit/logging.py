import logging
from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "newman_junit"

def setup_logging(level: str = "INFO", stderr: bool = True) -> logging.Logger:
    # reports may go to stdout, keep log lines on stderr
    handler = RichHandler(console=Console(stderr=stderr), rich_tracebacks=True, show_path=False)
    logging.basicConfig(level=level.upper(), format="%(message)s", datefmt="[%X]", handlers=[handler], force=True)
    return logging.getLogger(LOGGER_NAME)
