"""
Settings stored as a sub-language of python, one assignment per line::

    # comment
    newline = False
    logger.error = "[b|red]error[:]: {}"

Only the fields that were set are written back.
"""

import re
import ast
import typing
from pathlib import Path


class DecodeError(Exception):
    def __init__(self, text, index, expected):
        self.text = text
        self.index = index
        self.expected = expected

    def __str__(self):
        line = self.text.count("\n", 0, self.index)
        col = self.index - (self.text.rfind("\n", 0, self.index) + 1)
        return f"parse failed at {line}:{col}, expect: {self.expected!r}"


# literal grammars of the field types
LITERALS = {
    bool: re.compile(r"False|True"),
    str: re.compile(
        r'"('
        r'[^\\"\n]'
        r'|\\x[0-9a-fA-F]{2}'
        r'|\\u[0-9a-fA-F]{4}'
        r'|\\U[0-9a-fA-F]{8}'
        r'|\\[\\"\'abfnrtv]'
        r')*"'
    ),
}

FIELD = re.compile(r"(?P<name>[A-Za-z_]\w*(\.[A-Za-z_]\w*)*)[ ]*=[ ]*")
BLANK = re.compile(r"[ ]*(#[^\n]*)?(\n|$)")


def decode_value(type_hint, text, index):
    m = LITERALS[type_hint].match(text, index)
    if not m:
        raise DecodeError(text, index, type_hint.__name__)
    return ast.literal_eval(m.group()), m.end()


def encode_value(type_hint, value):
    if not isinstance(value, type_hint):
        raise TypeError(f"expect {type_hint.__name__}, got {value!r}")
    if type_hint is str:
        escaped = value.encode("unicode_escape").decode("ascii")
        return '"' + escaped.replace('"', '\\"') + '"'
    return repr(value)


class ConfigurableMeta(type):
    def __init__(self, name, supers, attrs):
        super().__init__(name, supers, attrs)

        fields = {(key,): hint for key, hint in typing.get_type_hints(self).items()}
        for key, sub in self.sub_configurations():
            for subfield, hint in sub.__configurable_fields__.items():
                fields[(key, *subfield)] = hint
        self.__configurable_fields__ = dict(sorted(fields.items()))

    def sub_configurations(self):
        for name in dir(self):
            value = getattr(self, name)
            if isinstance(value, ConfigurableMeta):
                yield name, value

    def __call__(self, *args, **kwargs):
        instance = super().__call__(*args, **kwargs)
        for name, sub in self.sub_configurations():
            instance.__dict__[name] = sub()
        return instance

    def get_configurable_fields(self):
        return dict(self.__configurable_fields__)


class Configurable(metaclass=ConfigurableMeta):
    """The super class of settings.

    Annotated attributes are fields, and a nested `Configurable` class
    becomes a sub-configuration addressed by a dotted name::

        class Settings(Configurable):
            newline: bool = True

            class markup(Configurable):
                quotes: str = "\\"'"

        settings = Settings()
        settings.set(("markup", "quotes"), '"')

    Each instance owns its sub-configurations. An unset field reads the class
    default.
    """

    def _locate(self, field):
        if field not in type(self).__configurable_fields__:
            raise ValueError("no such field: " + repr(field))

        parent = self
        for name in field[:-1]:
            parent = parent.__dict__[name]
        return parent, field[-1]

    def set(self, field, value):
        parent, name = self._locate(field)
        parent.__dict__[name] = value

    def unset(self, field):
        parent, name = self._locate(field)
        parent.__dict__.pop(name, None)

    def get(self, field):
        parent, name = self._locate(field)
        return getattr(parent, name)

    def has(self, field):
        if field not in type(self).__configurable_fields__:
            return False
        parent, name = self._locate(field)
        return name in parent.__dict__

    @classmethod
    def parse(clz, text):
        config = clz()
        fields = clz.__configurable_fields__
        index = 0

        while index < len(text):
            m = BLANK.match(text, index)
            if m:
                index = m.end()
                continue

            m = FIELD.match(text, index)
            field = tuple(m.group("name").split(".")) if m else None
            if field not in fields:
                raise DecodeError(text, index, [".".join(key) for key in fields])

            value, index = decode_value(fields[field], text, m.end())
            config.set(field, value)

            m = BLANK.match(text, index)
            if not m:
                raise DecodeError(text, index, "\n")
            index = m.end()

        return config

    @classmethod
    def read(clz, path):
        path = Path(path)
        if not path.exists():
            return clz()
        return clz.parse(path.read_text())

    def write(self, path):
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        lines = [
            ".".join(field) + " = " + encode_value(hint, self.get(field)) + "\n"
            for field, hint in type(self).__configurable_fields__.items()
            if self.has(field)
        ]
        path.write_text("".join(lines))
