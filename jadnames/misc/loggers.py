from __future__ import annotations
import logging
import sys
import traceback
import zlib

from .testing import is_testing


_ansi_prefix = "\x1b["
_clear = f"{_ansi_prefix}0m"

# level name colors, then the palette used to tint logger names
_LEVEL_COLORS = {
    logging.CRITICAL: "1;31",
    logging.ERROR: "31",
    logging.WARNING: "33",
    logging.INFO: "34",
}
_NAME_COLORS = ("31", "32", "33", "34", "35", "36")


def ansi_color_enabled() -> bool:
    """
    Colorized output is only enabled when both stdout and stderr are terminals.
    """
    return (
        hasattr(sys.stdout, "isatty") and sys.stdout.isatty() and hasattr(sys.stderr, "isatty") and sys.stderr.isatty()
    )


class Loggers:
    """
    Implements a loggers manager for jadnames.
    """

    __slots__ = (
        "default_level",
        "_loggers",
        "handler",
    )

    IN_SCOPE = ("jadnames", "archinfo", "networkx")

    def __init__(self, default_level=logging.WARNING):
        self.default_level = default_level
        self._loggers = {}
        self.load_all_loggers()

        self.handler = logging.StreamHandler()
        self.handler.setFormatter(CuteFormatter(ansi_color_enabled()))

        if not is_testing and len(logging.root.handlers) == 0:
            self.enable_root_logger()
            logging.root.setLevel(self.default_level)

    def load_all_loggers(self):
        """
        Collect every registered logger that belongs to jadnames or its dependencies.

        Adds attributes to this instance of each registered logger, replacing '.' with '_'
        """
        for name, logger in logging.Logger.manager.loggerDict.items():
            if any(name.startswith(x + ".") or name == x for x in self.IN_SCOPE):
                self._loggers[name] = logger

    def __getattr__(self, k):
        real_k = k.replace("_", ".")
        if real_k in self._loggers:
            return self._loggers[real_k]
        raise AttributeError(k)

    def __dir__(self):
        return list(super().__dir__()) + list(self._loggers.keys())

    def enable_root_logger(self):
        """
        Enable the default jadnames log handler
        """
        logging.root.addHandler(self.handler)

    def disable_root_logger(self):
        """
        Disable the default jadnames log handler
        """
        logging.root.removeHandler(self.handler)

    @staticmethod
    def setall(level):
        for name in logging.Logger.manager.loggerDict:
            if name == "jadnames" or name.startswith("jadnames."):
                logging.getLogger(name).setLevel(level)


class CuteFormatter(logging.Formatter):
    """
    A log formatter that can print log messages with colors.
    """

    __slots__ = ("_should_color",)

    def __init__(self, should_color: bool):
        super().__init__()
        self._should_color: bool = should_color

    def format(self, record: logging.LogRecord):
        name: str = record.name
        level: str = record.levelname
        message: str = record.getMessage()
        name_len: int = len(name)
        lvl_len: int = len(level)
        if self._should_color:
            for levelno, code in _LEVEL_COLORS.items():
                if record.levelno >= levelno:
                    level = f"{_ansi_prefix}{code}m{level}{_clear}"
                    break
            code = _NAME_COLORS[zlib.adler32(record.name.encode()) % len(_NAME_COLORS)]
            message = f"{_ansi_prefix}{code}m{message}{_clear}"
            name = f"{_ansi_prefix}{code}m{name}{_clear}"
        name = name.ljust(14 + len(name) - name_len)
        level = level.ljust(8 + len(level) - lvl_len)
        body: str = f"{level} | {self.formatTime(record, self.datefmt) : <23} | {name} | {message}"
        if record.exc_info:
            body += "\n" + "".join(traceback.format_exception(*record.exc_info))[:-1]
        return body
