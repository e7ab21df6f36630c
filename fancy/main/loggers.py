import sys
from ..utils import config as cfg
from ..utils import markups as mu
from ..printers import colorize


class LoggerSettings(cfg.Configurable):
    r"""
    Fields
    ------
    emph : str
        The template of emphasized text.
    warn : str
        The template of warning log.
    error : str
        The template of error log.
    caret : str
        The template of the caret pointing at the error location.
    """
    emph: str = "[b]{}"
    warn: str = "[b|yellow]warning[:b]:[:] {}"
    error: str = "[b|red]error[:b]:[:] {}"
    caret: str = "[b|red]{}"


class Logger:
    def __init__(self, logger_settings=None):
        if logger_settings is None:
            logger_settings = LoggerSettings()
        self.logger_settings = logger_settings

    def emph(self, msg):
        return colorize(self.logger_settings.emph, msg)

    def print(self, msg="", *args, end="\n", file=None, markup=True, flush=False):
        if file is None:
            file = sys.stdout

        if not markup:
            print(msg, end=end, file=file, flush=flush)
            return

        print(colorize(msg, *args), end=end, file=file, flush=flush)

    def warn(self, msg):
        self.print(self.logger_settings.warn, msg, file=sys.stderr)

    def error(self, msg):
        self.print(self.logger_settings.error, msg, file=sys.stderr)

    def report(self, err):
        """Print a markup error with the offending line and a caret under it.

        Parameters
        ----------
        err : markups.MarkupParseError
        """
        self.error(f"{err.reason} ({err.kind.value})")

        index = min(err.index, len(err.text))
        line, col = mu.MarkupParseError.locate(err.text, index)
        source = err.text.split("\n")[line]
        self.print(f"  {line}:{col} | {source}", markup=False, file=sys.stderr)
        margin = " " * (len(f"  {line}:{col} | ") + col)
        self.print(margin + self.logger_settings.caret, "^", file=sys.stderr)
