"""
Argtree faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every diagnostic the
  parser can emit. Codes are grouped by domain to keep logs/searches predictable.
- ParserException / ParserWarning: diagnostic records carrying a message plus
  options (title, code, hint, and whatever context the reporter attached) that
  know how to render themselves with rich.
- trigger(): print a fault on the diagnostics console (honouring quiet/fancy/colorful).
- getdoc(): optional description lookup for a code from the host application.

Contract
- Faults are records, not control flow: the parser never raises them. A node
  collects them in Node.faults and prints them (or hands them to a fallback).
- Messages are lowercased, position-aware and end with a single actionable hint.

Host customization (read from __main__)
- __prog__: program name shown in headers.
- __styles__: palette overrides.
- __codes__: mapping FaultCode -> label used instead of the numeric code.
- __docs__: mapping FaultCode -> short documentation string.
"""
import copy
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping (by high-level domain)
    - structure (2110x): problems in the declared tree, fixable only by the
      program that builds it.
      • SHORT_NAME_LENGTH, DUPLICATE_OPTION, DUPLICATE_COMMAND,
        NESTED_COMMAND, MIXED_PARAMS
    - input (2111x): problems in the token vector, fixable by the user.
      • UNKNOWN_OPTION, UNKNOWN_COMMAND, MISSING_VALUE, ARITY_MISMATCH
    - dispatch (2112x)
      • NO_COMMAND, MISSING_HANDLER
    - warnings (2211x): accessor misuse, never fatal.
      • UNKNOWN_NAME, SWITCH_VALUE
    """
    # --- structure errors (21xxx) ---
    SHORT_NAME_LENGTH = 21101
    DUPLICATE_OPTION  = 21102
    DUPLICATE_COMMAND = 21103
    NESTED_COMMAND    = 21104
    MIXED_PARAMS      = 21105

    # --- input errors (21xxx) ---
    UNKNOWN_OPTION    = 21111
    UNKNOWN_COMMAND   = 21112
    MISSING_VALUE     = 21113
    ARITY_MISMATCH    = 21114

    # --- dispatch errors (21xxx) ---
    NO_COMMAND        = 21121
    MISSING_HANDLER   = 21122

    # --- warnings (22xxx) ---
    UNKNOWN_NAME      = 22111
    SWITCH_VALUE      = 22112

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _render(self, kind, palette):
    """
    build the rich renderable shared by exceptions and warnings.

    layout
    - header: [ prog — code | title ]
    - body: message
    - footer: → hint
    """
    main = __import__("__main__")

    styles = defaultdict(str, palette | getattr(main, "__styles__", {}))
    colorful = self.options.get("colorful", False)

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if isinstance(fragment, Text):
            return fragment if colorful else Text(str(fragment))
        return Text(str(fragment), style)

    prog = text(getattr(main, "__prog__", self.options.get("prog", "")), styler("prog-name"))
    code = self.options.get("code")

    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(code.normalize() if code else "", styler("code")),
        " | ",
        text(self.options.get("title", kind).title(), styler(kind + "-title")),
        " ]"
    )
    message = text(self.message, styler(kind + "-message"))
    hint = Text.assemble(text(" → ", styler("hint-arrow")), text(self.options.get("hint"), styler("hint")))

    if self.options.get("fancy", False):
        return Panel(Group(message, hint), title=header, title_align="left")
    return Group(header, message, hint)


class ParserException(Exception):
    """
    Base record for fatal diagnostics (the parse attempt that produced it failed).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, "error", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #00E5FF",
            "error-title": "bold #FF4DA6",
            "error-message": "#C8C8D0",
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        })

    def __str__(self):
        return str(self.message)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class ShortNameLengthError(ParserException): ...
class DuplicateOptionError(ParserException): ...
class DuplicateCommandError(ParserException): ...
class NestedCommandError(ParserException): ...
class MixedParamsError(ParserException): ...
class UnknownOptionError(ParserException): ...
class UnknownCommandError(ParserException): ...
class MissingValueError(ParserException): ...
class ArityMismatchError(ParserException): ...
class NoCommandError(ParserException): ...
class MissingHandlerError(ParserException): ...


class ParserWarning(Warning):
    """
    Base record for non-fatal diagnostics (accessor misuse).
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    @property
    def code(self):
        return self.options.get("code")

    def __rich__(self):
        return _render(self, "warning", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",
            "warning-title": "bold #FFC2E0",
            "warning-message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def __str__(self):
        return str(self.message)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownNameWarning(ParserWarning): ...
class SwitchValueWarning(ParserWarning): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide a __replace__ method (see base classes); options are
      merged into a copy of the fault before rendering.
    - when the merged options say quiet, nothing is printed.

    returns
    - the merged fault, so callers can record exactly what was shown.
    """
    if not hasattr(fault, "__replace__") or not callable(fault.__replace__):
        raise TypeError("trigger() argument must have a __replace__ method")
    fault = copy.replace(fault, **options)
    if not fault.options.get("quiet", False):
        console.print(fault, soft_wrap=True, highlight=False)
    return fault


def getdoc(code, /):
    """
    optional documentation fetch for a fault code.

    the host application may expose a __docs__ mapping in __main__ where keys
    are FaultCode instances and values are short documentation strings.
    """
    if not isinstance(code, FaultCode):
        raise TypeError("getdoc() argument must be a fault-code")
    return getattr(__import__("__main__"), "__docs__", {}).get(code)


__all__ = (
    "ParserException",
    "ShortNameLengthError",
    "DuplicateOptionError",
    "DuplicateCommandError",
    "NestedCommandError",
    "MixedParamsError",
    "UnknownOptionError",
    "UnknownCommandError",
    "MissingValueError",
    "ArityMismatchError",
    "NoCommandError",
    "MissingHandlerError",
    "ParserWarning",
    "UnknownNameWarning",
    "SwitchValueWarning",
    "FaultCode",
    "trigger",
    "getdoc",
)
