"""Tests for fancy.utils.modes module."""

import pytest
from fancy.utils.sequences import SequenceBuilder
from fancy.utils.modes import ErrorKind, GrammarError, parse_modes, resolve_mode


def resolve(expression):
    builder = SequenceBuilder()
    parse_modes(expression, builder)
    return builder.view()


NAMED_MODES = [
    ("bold", 1),
    ("b", 1),
    ("dim", 2),
    ("faint", 2),
    ("italic", 3),
    ("i", 3),
    ("underline", 4),
    ("u", 4),
    ("inverse", 7),
    ("!", 7),
    ("hidden", 8),
    ("strikethrough", 9),
    ("s", 9),
    ("black", 30),
    ("red", 31),
    ("green", 32),
    ("yellow", 33),
    ("blue", 34),
    ("magenta", 35),
    ("cyan", 36),
    ("white", 37),
    ("default", 39),
    ("def", 39),
    ("?black", 40),
    ("?red", 41),
    ("?green", 42),
    ("?yellow", 43),
    ("?blue", 44),
    ("?magenta", 45),
    ("?cyan", 46),
    ("?white", 47),
    ("?default", 49),
    ("?def", 49),
]


class TestNamedModes:
    """Tests for the fixed table of styles and colors."""

    @pytest.mark.parametrize("name,code", NAMED_MODES)
    def test_named_mode(self, name, code):
        assert resolve(name) == f"\x1b[{code}m"

    def test_tokens_are_coalesced_in_order(self):
        """All codes of one expression should end up in one sequence."""
        assert resolve("bold|underline|blue") == "\x1b[1;4;34m"

    def test_empty_tokens_are_ignored(self):
        assert resolve("b||u|") == "\x1b[1;4m"
        assert resolve("") == ""

    def test_leading_colon_resets_first(self):
        assert resolve(":") == "\x1b[0m"
        assert resolve(":italic|red") == "\x1b[0m\x1b[3;31m"

    def test_controls_are_raw_sequences(self):
        assert resolve("blink") == "\x1b[5m"
        assert resolve("noblink") == "\x1b[25m"
        assert resolve("vis") == resolve("visible") == "\x1b[?25h"
        assert resolve("invis") == resolve("invisible") == "\x1b[?25l"

    def test_controls_keep_program_order(self):
        assert resolve("b|blink|u") == "\x1b[1m\x1b[5m\x1b[4m"


class TestColorCodes:
    """Tests for 256-color ids and truecolor hex codes."""

    @pytest.mark.parametrize(
        "token,expected",
        [
            ("0", "38;5;0"),
            ("69", "38;5;69"),
            ("214", "38;5;214"),
            ("?7", "48;5;7"),
            ("?187", "48;5;187"),
        ],
    )
    def test_ansi_color_id(self, token, expected):
        assert resolve(token) == f"\x1b[{expected}m"

    def test_hex_foreground(self):
        """Each pair of hex digits is converted to decimal."""
        assert resolve("#ababd2") == "\x1b[38;2;171;171;210m"

    def test_hex_background(self):
        assert resolve("?#7cd615") == "\x1b[48;2;124;214;21m"

    def test_hex_is_case_insensitive(self):
        assert resolve("#BABAF1") == resolve("#babaf1") == "\x1b[38;2;186;186;241m"

    def test_codes_mix_with_names(self):
        assert resolve("b|214|?#000000") == "\x1b[1;38;5;214;48;2;0;0;0m"


class TestErrors:
    """Tests for invalid tokens."""

    @pytest.mark.parametrize(
        "token,kind",
        [
            ("1234", ErrorKind.MALFORMED_NUMERIC_CODE),
            ("?0255", ErrorKind.MALFORMED_NUMERIC_CODE),
            ("#abc", ErrorKind.MALFORMED_HEX_CODE),
            ("#1234567", ErrorKind.MALFORMED_HEX_CODE),
            ("?#12345g", ErrorKind.MALFORMED_HEX_CODE),
            ("x?#abcdef", ErrorKind.MALFORMED_HEX_CODE),
            ("#", ErrorKind.MALFORMED_HEX_CODE),
            ("notacolor", ErrorKind.UNKNOWN_MODIFIER),
            ("?", ErrorKind.UNKNOWN_MODIFIER),
            ("red ", ErrorKind.UNKNOWN_MODIFIER),
            ("Bold", ErrorKind.UNKNOWN_MODIFIER),
        ],
    )
    def test_invalid_token(self, token, kind):
        with pytest.raises(GrammarError) as excinfo:
            resolve_mode(token, SequenceBuilder())
        assert excinfo.value.kind is kind
        assert excinfo.value.token == token
        assert token in excinfo.value.reason

    def test_offset_points_at_token(self):
        with pytest.raises(GrammarError) as excinfo:
            resolve("b|u|nope")
        assert excinfo.value.offset == 4

    def test_offset_counts_leading_colon(self):
        with pytest.raises(GrammarError) as excinfo:
            resolve(":b|zz")
        assert excinfo.value.offset == 3
