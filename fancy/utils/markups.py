import contextlib
import dataclasses
from typing import Optional
from .sequences import SequenceBuilder, RESET, ESC
from .modes import ErrorKind, GrammarError, parse_modes

# mode expression: [bold|cyan]Hello world[magenta]!
# reset: [:], [:italic]
# escape: [[, ]]
# source: "[b]{} is {}", name, value


class MarkupParseError(Exception):
    def __init__(self, text, index, kind, reason):
        self.text = text
        self.index = index
        self.kind = kind
        self.reason = reason

    @staticmethod
    @contextlib.contextmanager
    def at(text, index):
        try:
            yield
        except GrammarError as e:
            raise MarkupParseError(text, index + e.offset, e.kind, e.reason) from e

    @staticmethod
    def locate(text, index):
        if index > len(text):
            raise IndexError("string index out of range")
        line = text.count("\n", 0, index)
        last_ln = text.rfind("\n", 0, index)
        col = index - (last_ln + 1)
        return (line, col)

    def __str__(self):
        if self.index > len(self.text):
            return f"<out of bounds index {self.index}>"
        line, col = MarkupParseError.locate(self.text, self.index)
        return (
            f"parse fail at {line}:{col}, {self.reason}\n"
            + self.text[: self.index]
            + "◊"
            + self.text[self.index :]
        )


def scan(text, builder, start=0, quote=None):
    r"""Scan markup and feed it to the builder.

    Parameters
    ----------
    text : str
        The text to scan.
    builder : sequences.SequenceBuilder
        The builder receiving literal text and escape sequences.
    start : int, optional
        The index to start scanning at.
    quote : str, optional
        The closing delimiter of a string literal. When given, scanning stops
        at its first occurrence not escaped by a backslash. A backslash only
        pairs with a following delimiter or backslash, so a bracket after it
        is still markup.

    Returns
    -------
    index : int or None
        The index of the closing delimiter, or None if `quote` is not given.

    Raises
    ------
    MarkupParseError
        If the brackets do not match or a mode is invalid.
    """
    opened = None
    index = start
    length = len(text)

    while index < length:
        ch = text[index]

        if opened is None and ch in "[]" and text.startswith(ch, index + 1):
            builder.push(ch)
            index += 2
            continue

        if ch == "[":
            if opened is not None:
                raise MarkupParseError(
                    text,
                    index,
                    ErrorKind.NESTED_BRACKET,
                    "cannot have an opening square bracket inside a mode expression",
                )
            opened = index

        elif ch == "]" and opened is not None:
            with MarkupParseError.at(text, opened + 1):
                parse_modes(text[opened + 1 : index], builder)
            opened = None

        elif quote is not None and ch == quote:
            break

        elif quote is not None and ch == "\\" and text.startswith((quote, "\\"), index + 1):
            if opened is None:
                builder.push(text[index : index + 2])
            index += 2
            continue

        elif opened is None:
            builder.push(ch)

        index += 1

    else:
        if quote is not None:
            raise MarkupParseError(
                text,
                length,
                ErrorKind.MISSING_LITERAL_DELIMITER,
                f"unterminated string literal, expect {quote}",
            )

    if opened is not None:
        raise MarkupParseError(
            text,
            opened,
            ErrorKind.UNMATCHED_BRACKET,
            "unclosed square bracket, the mode expression is never closed",
        )

    return index if quote is not None else None


def assemble(builder):
    builder.flush()
    builder.raw(RESET)
    return builder.view()


def render(markup):
    r"""Translate markup into text with ANSI escape sequences.

    The whole string is scanned, and a reset sequence is appended to the
    result::

        render("[bold|cyan]Hello world[magenta]!")
        # '\x1b[1;36mHello world\x1b[35m!\x1b[0m'
    """
    if not isinstance(markup, str):
        raise TypeError(markup)
    builder = SequenceBuilder()
    scan(markup, builder)
    return assemble(builder)


@dataclasses.dataclass(frozen=True)
class Colorized:
    text: str
    args: Optional[str] = None
    quote: str = '"'

    def to_source(self):
        literal = self.quote + self.text.replace(ESC, "\\x1b") + self.quote
        if self.args is None:
            return literal
        return f"{literal}.format({self.args})"


def colorize_source(source, quotes="\"'"):
    r"""Translate the source text of a string literal with arguments.

    Parameters
    ----------
    source : str
        One string literal followed by an optional comma-separated argument
        list, e.g. ``'"[b]{}[:] is {}", name, value'``. The argument list is
        passed through untouched.
    quotes : str, optional
        The characters accepted as literal delimiters.

    Returns
    -------
    result : Colorized

    Raises
    ------
    MarkupParseError
        If the literal is not delimited or the markup is invalid.
    """
    if not source or source[0] not in quotes:
        raise MarkupParseError(
            source,
            0,
            ErrorKind.MISSING_LITERAL_DELIMITER,
            f"source must start with a string literal delimited by one of {quotes!r}",
        )

    quote = source[0]
    builder = SequenceBuilder()
    end = scan(source, builder, start=1, quote=quote)
    text = assemble(builder)

    args = source[end + 1 :].strip()
    if args.startswith(","):
        args = args[1:].strip()
    return Colorized(text, args or None, quote)


def escape(text):
    if not isinstance(text, str):
        raise TypeError(text)
    return text.replace("[", "[[").replace("]", "]]")
