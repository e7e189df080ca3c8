"""
Argtree utilities (internal helpers, carefully exposed)

Scope
- Small building blocks shared by the options and nodes layers.

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None.
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- mirror("attr")
  • Read-only property factory exposing a private backing field (self._attr); containers are
    handed out as frozen snapshots (tuple / MappingProxyType / frozenset).

- isnumeric(token)
  • Tell numeric literals ("-3", "+1.5", "2e10", ".5") apart from option tokens.

- placeholders(spec)
  • Count the "<...>" placeholders of a textual arity spec such as "<src> <dst>".

- wrap(text, indent, width=80)
  • Column wrapper used by the help renderer.

Stability and contract
- These utilities are re-exported via __all__; names not in __all__ are internal.
"""
import functools
import re
from collections.abc import Sequence, Mapping, Set
from types import MappingProxyType
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    This is used when None is a legitimate user value, but the API needs a way
    to distinguish “not provided” from “provided as None”. A single instance,
    Unset, is exposed for use as the default in internal parameters.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Resolve an internal Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(None, "fallback")   -> None
    """
    return object if object is not Unset else default


def _freeze(object):
    """
    Return a read-only snapshot of a container (shallow); other objects pass through.
    """
    if isinstance(object, Sequence) and not isinstance(object, (str, bytes, bytearray)):
        return tuple(object)
    elif isinstance(object, Mapping):
        return MappingProxyType(dict(object))
    elif isinstance(object, Set):
        return frozenset(object)
    return object


def mirror(name, /):
    """
    Define a read-only property that mirrors a private backing attribute.

    The generated property reads "_{name}" from the instance. Containers are
    returned as frozen snapshots so callers cannot mutate parser state through
    the public API.
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    def getter(self):
        return _freeze(getattr(self, "_" + name))

    getter.__name__ = getter.__qualname__ = name
    return property(getter)


# A bare "-" is data (stdin/stdout); otherwise a digit is required so "-e" stays an option.
_NUMERIC = re.compile(r"-|(?=[0-9+\-.e]*[0-9])[0-9+\-.e]+")


def isnumeric(token, /):
    """
    Return True when the token reads as a numeric literal.

    Numeric literals (digits, leading sign, decimal point, exponent marker) are
    positional data even when they start with the option prefix, so that
    "-12" or "-1.5e3" can be passed as parameters. A lone "-" counts too.
    """
    return _NUMERIC.fullmatch(token) is not None


def placeholders(spec, /):
    """
    Count the "<...>" placeholders of a parameter spec ("<src> <dst>" -> 2).
    """
    return len(re.findall(r"<[^<>]*>", spec or ""))


def wrap(text, indent=0, width=80, /):
    """
    Break text into lines for the help renderer.

    rules
    - an explicit line break always ends the running line.
    - once the running line (including the indent) has reached `width`, it is
      broken at the next space; the space itself is dropped.
    - every line after the first is prefixed with `indent` spaces; the first
      line is not, the caller has already positioned it.
    """
    lines = []
    line = ""
    for char in text:
        if char == "\n":
            lines.append(line)
            line = ""
        elif char == " " and indent + len(line) >= width:
            lines.append(line)
            line = ""
        else:
            line += char
    lines.append(line)
    return lines[:1] + [" " * indent + line for line in lines[1:]]


@functools.cache
def ordinal(number, /):
    """
    Return a human-friendly ordinal label for a 1-based position.
    """
    try:
        return {
            1: "first",
            2: "second",
            3: "third",
            4: "fourth",
            5: "fifth",
            6: "sixth",
            7: "seventh",
            8: "eighth",
            9: "ninth",
            10: "tenth",
        }[number]
    except KeyError:
        pass

    # 11th, 12th, 13th (and 111th, 112th, ...)
    if 10 < number % 100 < 20:
        return f"{number}th"
    return f"{number}%s" % {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Notes
- Singleton: there is only one Unset instance.
- Falsey: bool(Unset) is False, but it is not equivalent to None or 0.
"""


__all__ = (
    # Functions
    "coalesce",
    "mirror",
    "isnumeric",
    "placeholders",
    "wrap",
    "ordinal",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
