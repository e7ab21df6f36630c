import re
import wcwidth

ESC = "\x1b"
RESET = f"{ESC}[0m"

CSI_SEQUENCE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")


def sgr(*codes):
    return f"{ESC}[{';'.join(map(str, codes))}m"


class SequenceBuilder:
    """Accumulate literal text and escape sequences.

    Numeric SGR codes added with `add` are held back and coalesced into one
    sequence when the builder is flushed, so that::

        builder.add(1)
        builder.add(4)
        builder.add(34)
        builder.flush()

    emits ``"\\x1b[1;4;34m"`` instead of three sequences. Raw sequences are
    written immediately, after anything still pending.
    """

    def __init__(self):
        self.text = []
        self.next = []

    def add(self, code):
        self.next.append(str(code))

    def raw(self, sequence):
        self.flush()
        self.text.append(sequence)

    def flush(self):
        if self.next:
            self.text.append(sgr(*self.next))
            self.next.clear()

    def push(self, text):
        self.text.append(text)

    def view(self):
        return "".join(self.text)


def strip(text):
    return CSI_SEQUENCE.sub("", text)


def widthof(text, unicode_version="auto"):
    r"""Compute the printable width of produced text.

    Parameters
    ----------
    text : str
        The text, possibly containing escape sequences.
    unicode_version : str, optional
        The unicode version used by `wcwidth`.

    Returns
    -------
    width : int
        The number of terminal cells, or -1 if the text contains
        non-printable characters other than escape sequences.
    """
    width = 0
    for ch in strip(text):
        w = wcwidth.wcwidth(ch, unicode_version)
        if w == -1:
            return -1
        width += w
    return width
