import sys
from .utils.markups import render


def colorize(fmt, *args, **kwargs):
    r"""Colorize and format a string.

    The markup in `fmt` is translated first, then the arguments are
    substituted by `str.format`. Markup inside the arguments is not
    interpreted::

        colorize("{}I am not bold!", "[bold]")
        # '[bold]I am not bold!\x1b[0m'

    Without arguments the colorized text is returned as is, braces included.
    """
    text = render(fmt)
    if not args and not kwargs:
        return text
    return text.format(*args, **kwargs)


def printcol(fmt, *args, file=None, **kwargs):
    print(colorize(fmt, *args, **kwargs), end="", file=file or sys.stdout, flush=True)


def printcoln(fmt, *args, file=None, **kwargs):
    print(colorize(fmt, *args, **kwargs), file=file or sys.stdout, flush=True)


def eprintcol(fmt, *args, **kwargs):
    printcol(fmt, *args, file=sys.stderr, **kwargs)


def eprintcoln(fmt, *args, **kwargs):
    printcoln(fmt, *args, file=sys.stderr, **kwargs)
