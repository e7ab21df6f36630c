import re
import enum
from .sequences import ESC, RESET

# [tok|tok|...]
#   styles: [bold], [b|u], [!]
#   colors: [red], [?blue], [def]
#   codes:  [214], [?187], [#babaf1], [?#babaf1]
#   reset:  [:], [:bold]


class ErrorKind(enum.Enum):
    UNMATCHED_BRACKET = "unmatched bracket"
    NESTED_BRACKET = "nested bracket"
    UNKNOWN_MODIFIER = "unknown modifier"
    MALFORMED_NUMERIC_CODE = "malformed numeric code"
    MALFORMED_HEX_CODE = "malformed hex code"
    MISSING_LITERAL_DELIMITER = "missing literal delimiter"


class GrammarError(Exception):
    def __init__(self, kind, token, offset=0, reason=None):
        self.kind = kind
        self.token = token
        self.offset = offset
        self.reason = reason or f"{kind.value}: {token!r}"
        super().__init__(self.reason)


class Palette(enum.Enum):
    BLACK = "black"
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"
    BLUE = "blue"
    MAGENTA = "magenta"
    CYAN = "cyan"
    WHITE = "white"
    DEFAULT = "default"


_palette = {color: 30 + i for i, color in enumerate(Palette) if color is not Palette.DEFAULT}
_palette[Palette.DEFAULT] = 39

styles = {
    "bold": 1,
    "b": 1,
    "dim": 2,
    "faint": 2,
    "italic": 3,
    "i": 3,
    "underline": 4,
    "u": 4,
    "inverse": 7,
    "!": 7,
    "hidden": 8,
    "strikethrough": 9,
    "s": 9,
}

colors = {color.value: code for color, code in _palette.items()}
colors["def"] = colors["default"]

bgcolors = {"?" + name: code + 10 for name, code in colors.items()}

controls = {
    "visible": f"{ESC}[?25h",
    "vis": f"{ESC}[?25h",
    "invisible": f"{ESC}[?25l",
    "invis": f"{ESC}[?25l",
    "blink": f"{ESC}[5m",
    "noblink": f"{ESC}[25m",
}

modes = {**styles, **colors, **bgcolors}

ANSI_CODE = re.compile(r"(?P<bg>\?)?(?P<id>[0-9]{1,3})")
HEX_CODE = re.compile(r"(?P<bg>\?)?#(?P<r>[0-9a-fA-F]{2})(?P<g>[0-9a-fA-F]{2})(?P<b>[0-9a-fA-F]{2})")
DECIMAL = re.compile(r"\??[0-9]+")


def resolve_mode(token, builder):
    """Apply a single mode token to the sequence builder.

    Parameters
    ----------
    token : str
        The mode token, e.g. ``"bold"``, ``"?red"``, ``"214"`` or ``"#babaf1"``.
    builder : sequences.SequenceBuilder
        The builder receiving the codes.

    Raises
    ------
    GrammarError
        If the token is not a valid mode.
    """
    if not token:
        return

    if token in modes:
        builder.add(modes[token])
        return

    if token in controls:
        builder.raw(controls[token])
        return

    m = ANSI_CODE.fullmatch(token)
    if m:
        builder.add(f"{48 if m.group('bg') else 38};5;{m.group('id')}")
        return

    m = HEX_CODE.fullmatch(token)
    if m:
        r, g, b = (int(m.group(c), 16) for c in "rgb")
        builder.add(f"{48 if m.group('bg') else 38};2;{r};{g};{b}")
        return

    if token.startswith("#") or "?#" in token:
        raise GrammarError(
            ErrorKind.MALFORMED_HEX_CODE,
            token,
            reason=f"invalid hex color code: {token!r}, hex color codes must be"
            " a '#' or '?#' followed by exactly 6 hex digits",
        )

    if DECIMAL.fullmatch(token):
        raise GrammarError(
            ErrorKind.MALFORMED_NUMERIC_CODE,
            token,
            reason=f"invalid ansi color code: {token!r}, ansi color codes must"
            " have 1 to 3 decimal digits",
        )

    raise GrammarError(ErrorKind.UNKNOWN_MODIFIER, token, reason=f"unknown modifier: {token!r}")


def parse_modes(expression, builder):
    """Apply the content of one mode expression, then flush the builder.

    Parameters
    ----------
    expression : str
        The text between ``[`` and ``]``.
    builder : sequences.SequenceBuilder
        The builder receiving the codes.

    Raises
    ------
    GrammarError
        On the first invalid token; `offset` is the index of the token in
        `expression`.
    """
    offset = 0
    if expression.startswith(":"):
        builder.raw(RESET)
        offset = 1

    for token in expression[offset:].split("|"):
        try:
            resolve_mode(token, builder)
        except GrammarError as e:
            e.offset = offset
            raise
        offset += len(token) + 1

    builder.flush()
