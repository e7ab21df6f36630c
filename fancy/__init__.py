__version__ = "0.1.0"

from .utils.markups import (
    MarkupParseError,
    Colorized,
    render,
    colorize_source,
    escape,
)
from .utils.modes import ErrorKind
from .printers import colorize, printcol, printcoln, eprintcol, eprintcoln
