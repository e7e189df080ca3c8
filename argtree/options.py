"""
Argtree option declarations.

Overview
- Option: a named setting attached to a node. It pairs an immutable
  declaration (short name, long name, description, whether it takes a value,
  default) with the per-parse result (toggled, value).
  • Switch: presence-only option (e.g., -f/--force); its default is "0".
  • Value: option followed by a value token (e.g., -o/--outfile FILE).

- Introspection & representation
  • OptionType metaclass provides stable __repr__/__rich_repr__ and exposes the
    fields listed in __introspectable__ as read-only properties.

Naming
- Names are declared bare: short "f", long "force". On the command line they
  are spelled "-f" and "--force".
- Structural rules (short name length, duplicates) are not enforced here; the
  owning node validates them before every parse so that a bad declaration
  fails the parse instead of the program setup.

Quick example:
    >>> force = Switch("f", "force", "force a certain thing")
    >>> outfile = Value("o", "outfile", "write output to file", "out.txt")
    >>> outfile.matches("--outfile")
    True
"""
import functools
import operator
import re

from rich.text import Text

from .utils import *


class OptionType(type):
    """
    Metaclass that turns option classes into introspectable declarations.

    Responsibilities
    - Expose selected fields as read-only properties using mirror() for all
      names listed in __introspectable__.
    - Provide stable, readable __repr__/__rich_repr__ implementations.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages and help output.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - switch(short='f', long='force', ...)
            """
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        def __rich_repr__(self):
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: type-check and normalize option metadata.

    Rules
    - short: str, stripped; may be empty (no short form).
    - long: str, stripped; must not be empty.
    - descr: str | Text; strings are stripped.
    - default: str.

    Raises
    - TypeError: when a field has the wrong type.
    - ValueError: when the long name is empty.

    Notes
    - This function mutates the provided metadata dict in place.
    """
    if not isinstance(short := metadata["short"], str):
        raise TypeError(f"{cls.__typename__} 'short' must be a string")
    metadata["short"] = short.strip()

    if not isinstance(long := metadata["long"], str):
        raise TypeError(f"{cls.__typename__} 'long' must be a string")
    elif not (long := long.strip()):
        raise ValueError(f"{cls.__typename__} 'long' cannot be empty")
    metadata["long"] = long

    if not isinstance(descr := metadata["descr"], str | Text):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = descr.strip() if isinstance(descr, str) else descr

    if not isinstance(metadata["default"], str):
        raise TypeError(f"{cls.__typename__} 'default' must be a string")


class Option(metaclass=OptionType):
    """
    Named option declaration plus its per-parse result.

    Properties
    - short, long, descr, valued, default: declaration (never changes).
    - toggled: True once the option was seen in the last parse.
    - value: the token consumed after a value option in the last parse ("" otherwise).

    Use Switch or Value to build concrete options; Option itself only carries
    the shared behavior.
    """

    __introspectable__ = (
        "short",
        "long",
        "descr",
        "valued",
        "default",
        "toggled",
        "value",
    )

    __valued__ = False
    __default__ = ""

    def __init__(self, short, long, descr="", default=Unset, /):
        metadata = {
            "short": short,
            "long": long,
            "descr": descr,
            "default": coalesce(default, type(self).__default__),
        }
        _sanitize_metadata(type(self), metadata)

        for name, object in metadata.items():
            setattr(self, "_" + name, object)
        self._valued = type(self).__valued__
        self._toggled = False
        self._value = ""

    def names(self):
        """
        Return the command-line spellings of this option ("-f", "--force").
        """
        return (("-" + self.short,) if self.short else ()) + ("--" + self.long,)

    def matches(self, token, /):
        """
        Tell whether a raw token spells this option.

        - "-x" matches when "x" is the short name.
        - "--name" matches when "name" is the long name.
        """
        if not token.startswith("-"):
            return False
        if self.short and token[1:] == self.short:
            return True
        return token.startswith("--") and token[2:] == self.long

    def named(self, name, /):
        """
        Tell whether a bare name ("f" or "force") refers to this option.
        """
        return bool(self.short) and self.short == name or self.long == name

    def toggle(self, value=Unset, /):
        """
        Record that the option was seen; value options also store their value.
        """
        self._toggled = True
        if self.valued:
            self._value = coalesce(value, "")

    def reset(self):
        """
        Drop the result of a previous parse.
        """
        self._toggled = False
        self._value = ""

    def current(self):
        """
        Return the effective value: the parsed one when toggled, else the default.
        """
        return self.value if self.toggled else self.default


class Switch(Option):
    """
    Presence-only option (no payload); e.g. -f/--force.
    """
    __valued__ = False
    __default__ = "0"


class Value(Option):
    """
    Option that consumes the following token as its value; e.g. -o/--outfile FILE.
    """
    __valued__ = True
    __default__ = ""


__all__ = (
    "Option",
    "Switch",
    "Value",
)

# Not part of the public API.
del OptionType
