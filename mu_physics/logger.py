from typing import Optional, List
import logging

from rich.logging import RichHandler
from rich.console import Console

from .config import read_config


class CustomFilter(logging.Filter):
    def __init__(self, modules: Optional[List] = None) -> None:
        self.modules = list(modules) if modules else []
        self.modules.append("mu_physics")

    def filter(self, record: logging.LogRecord) -> bool:
        base = record.name.split(".")[0]
        return base in self.modules


class LogfileHandler(RichHandler):
    """A RichHandler writing to a file it owns, closed along with the handler"""

    def __init__(self, logfile: str, **kwargs) -> None:
        super().__init__(console=Console(file=open(logfile, "wt")), **kwargs)

    def close(self) -> None:
        try:
            self.console.file.close()
        finally:
            super().close()


def setup_logger(
    level: Optional[str] = None,
    modules: Optional[List] = None,
    logfile: Optional[str] = None,
) -> logging.Logger:
    """Return a logger printing through rich.
    Records from particle generation are very chatty at DEBUG level, so only records
    coming from mu_physics and the modules listed in "modules" are kept.

    Parameters
    ----------
        level: str, optional
            Level of information returned by the logger, can be either INFO or DEBUG.
            Defaults to the ``[logging] level`` entry of the configuration, or INFO
        modules: list, optional
            Modules from which we want to get logging information
        logfile: str, optional
            If specified, the information is dumped not only on stdout but also here
    """
    if level is None:
        level = read_config().get("logging", {}).get("level", "INFO")

    logger = logging.getLogger()

    possible_levels = ["INFO", "DEBUG"]
    if level not in possible_levels:
        raise ValueError(
            "Passed wrong level for the logger. Allowed levels are: {}".format(
                ", ".join(possible_levels)
            )
        )
    logger.setLevel(getattr(logging, level))

    formatter = logging.Formatter("%(message)s")
    filt = CustomFilter(modules)

    stream_handler = RichHandler(show_time=False, rich_tracebacks=True)
    stream_handler.setFormatter(formatter)
    stream_handler.addFilter(filt)
    logger.addHandler(stream_handler)

    if logfile:
        file_handler = LogfileHandler(logfile, show_time=False, rich_tracebacks=True)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(filt)
        logger.addHandler(file_handler)

    return logger
