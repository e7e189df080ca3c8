"""
Argtree node layer: declare, parse, and dispatch a command line.

What this module provides
- Node: one parser scope. The root node is the program's parser; each child
  node is a command with its own options and positional parameters.
  • Options are declared with add_switch()/add_value() on any node.
  • Commands are declared with add_command() (or the @node.command decorator)
    on the root; commands cannot declare commands of their own.
  • parse() scans the token vector once, left to right, and leaves the
    outcome on the tree (toggled options, collected params, chosen command,
    parse boundary, help flag).
  • exec_command() hands the chosen command node to its handler.

- Factories and helpers:
  • parser(usage, ...): build a root node.
  • invoke(node, prompt): parse and dispatch in one call, returning a result code.

Core ideas
- Single pass, one token of lookahead (for option values); no backtracking.
- Boundaries: a bare "--" or an ignore-after command stops the scan and
  records Node.end so the caller can hand the remainder to another parser.
- Diagnostics are records: parse() never raises; it returns False and keeps
  the faults in Node.faults after printing them (see argtree.faults).
- A failed parse leaves the tree at its reset defaults.

Quick start
    from argtree import parser

    args = parser("usage: tool [options...] <file>")
    args.add_switch("v", "verbose", "talk more")

    @args.command("copy <src> <dst>", "copy a file")
    def copy(node):
        src, dst = node.params
        return 0

    if args.parse():
        raise SystemExit(args.exec_command())

See also
- argtree.options for option declarations.
- argtree.faults for fault codes and rendering behavior.
"""
import copy
import difflib
import functools
import operator
import os.path
import re
import shlex
import sys
from collections import defaultdict
from collections.abc import Iterable

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .faults import *
from .options import Switch, Value
from .utils import *

console = Console()

# Help requests recognized when no declared option claims the token.
HELPERS = ("-h", "-help", "--help", "-?", "/?", "/h", "/help")

# Column at which help text is wrapped.
WIDTH = 80


class NodeType(type):
    """
    Metaclass that exposes node state as read-only, introspectable properties.

    Responsibilities
    - Mirror every name listed in __introspectable__ as a read-only property
      backed by "_{name}" (containers are handed out as frozen snapshots).
    - Provide stable, readable __repr__/__rich_repr__ for diagnostics.

    Conventions
    - __displayable__ (if set) narrows which properties are shown by __rich_repr__;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

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
            return f"{type(self).__typename__}({
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__()))
            })"
        self.__repr__ = __repr__

        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _split_command(cls, source, /):
    """
    Split "name <a> <b>" into ("name", "<a> <b>").
    """
    if not isinstance(source, str):
        raise TypeError(f"{cls.__typename__} command must be a string")
    name, _, spec = source.strip().partition(" ")
    if not name:
        raise ValueError(f"{cls.__typename__} command name cannot be empty")
    return name, spec.strip()


def _suggest(input, choices, route, typeof):
    """
    Build a hint with the closest spellings, falling back to a help pointer.
    """
    try:
        return "did you mean %r? you can also run '%s --help' to see all %s" % (
            difflib.get_close_matches(input, choices, 1)[0], route, typeof
        )
    except IndexError:
        return "run '%s --help' to see all %s" % (route, typeof)


class Node(metaclass=NodeType):
    """
    Parser scope owning options, positional parameters and (at the root) commands.

    Declaration (set up once, before parsing)
    - usage: first line is the short usage; the rest is a detail paragraph.
    - name/spec: command name and its parameter spec ("<src> <dst>"); the root
      has an empty name and, by default, no spec.
    - handler: callable receiving the chosen command node, returning an int.
    - arity: when True, the number of collected params must match the number
      of "<...>" placeholders in spec.
    - ignore_after: once this command is chosen, nothing after it is parsed.
    - colorful/fancy/quiet: output flags, inherited by commands.

    Result (rebuilt by every parse)
    - params, chosen, end, helped, faults; plus each option's toggled/value.

    Notes
    - Nodes own their options and children outright; a child keeps no
      reference to its parent. Its route ("tool copy") is fixed at creation.
    """

    __introspectable__ = (
        "usage",
        "name",
        "spec",
        "route",
        "handler",
        "arity",
        "ignore_after",
        "options",
        "children",
        "params",
        "chosen",
        "end",
        "helped",
        "faults",
        "colorful",
        "fancy",
        "quiet",
    )

    __displayable__ = (
        "name",
        "spec",
        "usage",
        "options",
        "children",
        "params",
        "chosen",
        "end",
        "helped",
    )

    def __init__(
            self,
            usage="",
            /,
            name="",
            spec=Unset,
            handler=None,
            *,
            route=Unset,
            arity=True,
            ignore_after=False,
            colorful=Unset,
            fancy=Unset,
            quiet=Unset
    ):
        """
        Construct a node.

        Parameters
        - usage: str
          Usage text; first line short usage, remaining lines a detail paragraph.
        - name: str
          Command name ("" for the root).
        - spec: str | Unset
          Parameter spec. Unset means "not declared": no arity check applies.
        - handler: Callable[[Node], int] | None
          Command handler used by exec_command().
        - route: str | Unset
          Display route used in help and hints; defaults to the program name.
        - arity, ignore_after: bool
          See the class docstring.
        - colorful, fancy, quiet: bool | Unset
          Output flags; Unset means False.

        Raises
        - TypeError on wrongly typed arguments.
        """
        if not isinstance(usage, str):
            raise TypeError(f"{type(self).__typename__} 'usage' must be a string")
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__typename__} 'name' must be a string")
        if not isinstance(spec, str | Unset):
            raise TypeError(f"{type(self).__typename__} 'spec' must be a string")
        if handler is not None and not callable(handler):
            raise TypeError(f"{type(self).__typename__} 'handler' must be callable")
        if not isinstance(route, str | Unset):
            raise TypeError(f"{type(self).__typename__} 'route' must be a string")

        self._usage = usage
        self._name = name
        self._spec = coalesce(spec)
        self._route = coalesce(route, os.path.basename(sys.argv[0]) or "prog")
        self._handler = handler
        self._arity = bool(arity)
        self._ignore_after = bool(ignore_after)
        self._colorful = bool(coalesce(colorful, False))
        self._fancy = bool(coalesce(fancy, False))
        self._quiet = bool(coalesce(quiet, False))

        self._options = []
        self._children = []
        self._fallback = Unset

        self._params = []
        self._chosen = False
        self._end = 0
        self._helped = False
        self._faults = []

    # ── Declaration ─────────────────────────────────────────────────────────

    def add_switch(self, short, long, descr="", /):
        """
        Declare an on/off option (e.g. -f/--force) and return it.
        """
        self._options.append(switch := Switch(short, long, descr))
        return switch

    def add_value(self, short, long, descr="", default="", /):
        """
        Declare an option followed by a value (e.g. -o/--outfile FILE) and return it.
        """
        self._options.append(value := Value(short, long, descr, default))
        return value

    def add_command(self, source, descr="", handler=None, /, *, arity=True, ignore_after=False):
        """
        Declare a command under this node and return the new child node.

        Parameters
        - source: str
          Command name optionally followed by its parameter spec, e.g. "copy <src> <dst>".
        - descr: str
          Used as the child's usage text (first line is listed in the parent's help).
        - handler: Callable[[Node], int] | None
          Invoked by exec_command() with the child node.
        - arity: bool (keyword-only)
          Enforce the spec's placeholder count on collected params.
        - ignore_after: bool (keyword-only)
          Stop parsing right after this command's name.

        Notes
        - Output flags are copied from this node.
        - Nesting is accepted here but rejected by validation on the next parse.
        """
        name, spec = _split_command(type(self), source)
        child = type(self)(
            descr,
            name,
            spec,
            handler,
            route=f"{self.route} {name}",
            arity=arity,
            ignore_after=ignore_after,
            colorful=self.colorful,
            fancy=self.fancy,
            quiet=self.quiet,
        )
        self._children.append(child)
        return child

    def command(self, source, descr="", /, **options):
        """
        Decorator form of add_command(); the decorated callable becomes the handler.

            @args.command("copy <src> <dst>", "copy a file")
            def copy(node): ...

        Returns the child node (the decorated name is bound to it).
        """
        def wrapper(handler, /):
            if not callable(handler):
                raise TypeError("@command() must be applied to a callable")
            return self.add_command(source, descr, handler, **options)

        return wrapper

    def fallback(self, fallback, /):
        """
        Register a one-time redirect for diagnostics.

        Every fault is still recorded in faults, but instead of being printed
        it is passed to `fallback`. Can be set only once per node. Returns the
        callable, enabling decorator-style usage: @node.fallback
        """
        if not callable(fallback):
            raise TypeError(f"{type(self).__typename__} fallback must be callable")
        if self._fallback is not Unset:
            raise TypeError(f"{type(self).__typename__} fallback cannot be overridden")
        self._fallback = fallback
        return fallback

    # ── Diagnostics ─────────────────────────────────────────────────────────

    def _trigger(self, fault, /, **options):
        """
        Record a fault on this node and surface it (fallback or console).
        """
        fault = copy.replace(
            fault,
            **options,
            prog=self.route.partition(" ")[0],
            colorful=self.colorful,
            fancy=self.fancy,
            quiet=self.quiet,
        )
        self._faults.append(fault)
        if self._fallback is not Unset:
            self._fallback(fault)
        else:
            trigger(fault)
        return fault

    # ── Validation ──────────────────────────────────────────────────────────

    def validate(self, depth=0, /):
        """
        Check the declared tree before parsing; return True when it is sound.

        Failures (each emits one diagnostic, the first one found wins)
        - a short name that is not exactly one character.
        - a short or long name declared twice on the same node.
        - two commands with the same name.
        - a command declaring commands (depth 1 with children).
        - a root mixing commands with its own positional params spec.

        Validation never touches parse results.
        """
        return self._check(depth, self)

    def _check(self, depth, tool, /):
        seen = set()
        for option in self._options:
            if option.short and len(option.short) != 1:
                tool._trigger(ShortNameLengthError(
                    "short option names must be one character exactly (not %r) in '%s'" % (option.short, self.route),
                    title="bad short name",
                    code=FaultCode.SHORT_NAME_LENGTH,
                    hint="use a single character for the short form of --%s" % option.long,
                    docs=getdoc(FaultCode.SHORT_NAME_LENGTH),
                ))
                return False
            for name in filter(None, (option.short, option.long)):
                if name in seen:
                    tool._trigger(DuplicateOptionError(
                        "option %r appears twice in '%s'" % (name, self.route),
                        title="duplicate option",
                        code=FaultCode.DUPLICATE_OPTION,
                        hint="give every option of a command its own short and long name",
                        docs=getdoc(FaultCode.DUPLICATE_OPTION),
                    ))
                    return False
                seen.add(name)

        if depth >= 1 and self._children:
            tool._trigger(NestedCommandError(
                "command '%s' cannot declare commands of its own" % self.route,
                title="nested command",
                code=FaultCode.NESTED_COMMAND,
                hint="declare commands on the root only, or end '%s' with ignore_after and parse the rest separately" % self.route,
                docs=getdoc(FaultCode.NESTED_COMMAND),
            ))
            return False

        if depth == 0 and self._children and placeholders(self.spec):
            tool._trigger(MixedParamsError(
                "'%s' declares both commands and positional parameters" % self.route,
                title="commands mixed with parameters",
                code=FaultCode.MIXED_PARAMS,
                hint="move the parameters %r to the commands that take them" % self.spec,
                docs=getdoc(FaultCode.MIXED_PARAMS),
            ))
            return False

        names = set()
        for child in self._children:
            if child.name in names:
                tool._trigger(DuplicateCommandError(
                    "command %r appears twice in '%s'" % (child.name, self.route),
                    title="duplicate command",
                    code=FaultCode.DUPLICATE_COMMAND,
                    hint="give every command its own name",
                    docs=getdoc(FaultCode.DUPLICATE_COMMAND),
                ))
                return False
            names.add(child.name)

        return all(child._check(depth + 1, tool) for child in self._children)

    # ── Parsing ─────────────────────────────────────────────────────────────

    def _reset(self, *, rollback=False):
        """
        Clear parse results across the whole subtree.

        On rollback (after a failed parse) the help flags are kept so callers
        can tell "help was asked for" from "the input was wrong".
        """
        for option in self._options:
            option.reset()
        self._params.clear()
        self._chosen = False
        self._end = 0
        if not rollback:
            self._helped = False
        for child in self._children:
            child._reset(rollback=rollback)

    def parse(self, tokens=Unset, /, start=Unset):
        """
        Parse a command line into this tree; return True on success.

        Parameters
        - tokens:
          • Unset: sys.argv, starting at index 1 (skips the program name).
          • str: shell-like string, split with shlex.split, starting at index 0.
          • Iterable[str]: pre-tokenized sequence, starting at index 0.
        - start: int
          Index of the first token to scan; overrides the defaults above.

        Returns
        - True when the whole tree was validated and the input was understood.
        - False on structural errors, input errors, or when help was shown
          (helped is True in that last case). Faults are in self.faults.

        Notes
        - end is an index into the token list (see scan rules in _parseargs).
        - parse() never raises on bad input; TypeError/ValueError are reserved
          for wrong argument types.
        """
        if tokens is Unset:
            tokens, index = sys.argv, 1
        elif isinstance(tokens, str):
            tokens, index = shlex.split(tokens), 0
        elif isinstance(tokens, Iterable):
            tokens, index = list(tokens), 0
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("parse() argument must be a string or an iterable of strings")
        else:
            raise TypeError("parse() argument must be a string or an iterable of strings")

        if not isinstance(start := coalesce(start, index), int):
            raise TypeError("parse() 'start' must be an integer")
        elif start < 0:
            raise ValueError("parse() 'start' cannot be negative")

        return self._parseargs(list(tokens), start)

    def _forget(self):
        """
        Drop the fault records of the whole subtree.
        """
        self._faults.clear()
        for child in self._children:
            child._forget()

    def _parseargs(self, tokens, start):
        """
        validate, reset, scan; roll back on failure.
        """
        self._forget()

        if not self._check(0, self):
            return False

        self._reset()
        if self._scan(tokens, start):
            return True
        self._reset(rollback=True)
        return False

    def _scan(self, tokens, start):
        """
        the single left-to-right pass.

        scan rules (per token)
        - "--": stop; end is the index of the terminator.
        - option-like ("-x", "--name", or a slash help alias that is last or
          sits on a root with commands) and not a numeric literal or a lone
          "-": matched against the active node's options (the chosen
          command's once one is chosen, the root's before). Value options
          take the next token verbatim. Unmatched help aliases show help;
          anything else unmatched is an unknown option.
        - anything else, while the root has commands and none is chosen: must
          name a command (or be "help"). An ignore-after command stops the
          scan with end just past its name.
        - anything else: a positional param of the active node.

        after the pass
        - the active command's (or the root's, when it declares a spec) param
          count is checked against its spec placeholders.
        - end is len(tokens) unless the scan stopped early.
        """
        command = None
        active = self
        index = start
        count = len(tokens)

        while index < count:
            token = tokens[index]
            last = index == count - 1
            position = ordinal(index - start + 1)

            if token == "--":
                self._end = index
                break

            # Slash aliases are plain data unless they can ask for help.
            slashed = token in HELPERS and (last or bool(self._children))
            if (token.startswith("-") or slashed) and not isnumeric(token):
                option = next((x for x in active._options if x.matches(token)), None)
                if option is None:
                    if token in HELPERS and last:
                        return self._help(active, 1 if command else 0)
                    if token in HELPERS and self._children:
                        return self._help(self._target(tokens[index + 1], ordinal(index - start + 2)), 1)
                    self._trigger(UnknownOptionError(
                        "unknown option %r at %s position" % (token, position),
                        title="unknown option",
                        code=FaultCode.UNKNOWN_OPTION,
                        input=token,
                        index=index,
                        hint=_suggest(token, [x for declared in active._options for x in declared.names()], active.route, "options"),
                        docs=getdoc(FaultCode.UNKNOWN_OPTION),
                    ))
                    return False

                if option.valued:
                    if last:
                        self._trigger(MissingValueError(
                            "option %r at %s position expects a value" % (token, position),
                            title="missing value",
                            code=FaultCode.MISSING_VALUE,
                            input=token,
                            index=index,
                            hint="pass it after a space (for example: --%s <something>)" % option.long,
                            docs=getdoc(FaultCode.MISSING_VALUE),
                        ))
                        return False
                    index += 1
                    option.toggle(tokens[index])
                else:
                    option.toggle()

            elif self._children and command is None:
                child = next((child for child in self._children if child.name == token), None)
                if child is None and token == "help":
                    if last:
                        return self._help(self, 0)
                    return self._help(self._target(tokens[index + 1], ordinal(index - start + 2)), 1)
                if child is None:
                    self._trigger(UnknownCommandError(
                        "unknown command %r at %s position" % (token, position),
                        title="unknown command",
                        code=FaultCode.UNKNOWN_COMMAND,
                        input=token,
                        index=index,
                        hint=_suggest(token, [child.name for child in self._children], self.route, "commands"),
                        docs=getdoc(FaultCode.UNKNOWN_COMMAND),
                    ))
                    return False

                child._chosen = True
                command = active = child
                if child.ignore_after:
                    self._end = index + 1
                    break

            else:
                active._params.append(token)

            index += 1
        else:
            self._end = count

        if active.spec is not None and active.arity and not active.ignore_after:
            expected = placeholders(active.spec)
            if expected != len(active._params):
                self._trigger(ArityMismatchError(
                    "'%s' expects %d %s but %d %s given" % (
                        active.route,
                        expected,
                        "parameter" if expected == 1 else "parameters",
                        len(active._params),
                        "was" if len(active._params) == 1 else "were",
                    ),
                    title="wrong number of parameters",
                    code=FaultCode.ARITY_MISMATCH,
                    expected=expected,
                    received=len(active._params),
                    hint="usage: %s %s" % (active.route, active.spec) if active.spec else "remove the extra parameters",
                    docs=getdoc(FaultCode.ARITY_MISMATCH),
                ))
                return False

        return True

    def _target(self, name, position):
        """
        Resolve the command a help request points at; None when it is unknown.
        """
        child = next((child for child in self._children if child.name == name), None)
        if child is None:
            self._trigger(UnknownCommandError(
                "unknown command %r at %s position" % (name, position),
                title="unknown command",
                code=FaultCode.UNKNOWN_COMMAND,
                input=name,
                hint=_suggest(name, [child.name for child in self._children], self.route, "commands"),
                docs=getdoc(FaultCode.UNKNOWN_COMMAND),
            ))
        return child

    def _help(self, node, depth):
        """
        Render help for `node` (when resolved) and end the parse as unsuccessful.
        """
        if node is not None:
            node.show_help(depth)
            self._helped = True
        return False

    # ── Results ─────────────────────────────────────────────────────────────

    def which_command(self):
        """
        Return the command chosen by the last parse, or None.
        """
        return next((child for child in self._children if child.chosen), None)

    def exec_command(self):
        """
        Run the chosen command's handler with the command node; return its result.

        Returns 1 (after a diagnostic) when no command was chosen or the chosen
        command has no handler. The handler's result is returned verbatim.
        """
        if (command := self.which_command()) is None:
            self._trigger(NoCommandError(
                "no command was chosen",
                title="no command",
                code=FaultCode.NO_COMMAND,
                hint="run '%s --help' to see all commands" % self.route,
                docs=getdoc(FaultCode.NO_COMMAND),
            ))
            return 1
        if command.handler is None:
            self._trigger(MissingHandlerError(
                "command %r has no handler" % command.name,
                title="missing handler",
                code=FaultCode.MISSING_HANDLER,
                hint="pass a handler to add_command() or use the @command decorator",
                docs=getdoc(FaultCode.MISSING_HANDLER),
            ))
            return 1
        return command.handler(command)

    def _find(self, name, /):
        """
        Look an option up by its bare short or long name; warn when it does not exist.
        """
        option = next((option for option in self._options if option.named(name)), None)
        if option is None:
            self._trigger(UnknownNameWarning(
                "option %r does not exist in '%s'" % (name, self.route),
                title="unknown option name",
                code=FaultCode.UNKNOWN_NAME,
                hint=_suggest(name, [x for option in self._options for x in (option.short, option.long) if x], self.route, "options"),
                docs=getdoc(FaultCode.UNKNOWN_NAME),
            ))
        return option

    def has(self, name, /):
        """
        Return True when the option (short or long name) was given in the last parse.
        """
        if (option := self._find(name)) is None:
            return False
        return option.toggled

    def get(self, name, /):
        """
        Return an option's value: the parsed one, else its default.

        - unknown names answer "" (after a warning).
        - switches answer "1"/"0" (after a warning; use has() for them).
        """
        if (option := self._find(name)) is None:
            return ""
        if not option.valued:
            self._trigger(SwitchValueWarning(
                "cannot use get() on switch %r" % name,
                title="get on a switch",
                code=FaultCode.SWITCH_VALUE,
                hint="use has(%r) instead" % name,
                docs=getdoc(FaultCode.SWITCH_VALUE),
            ))
            return "1" if option.toggled else "0"
        return option.current()

    def _integer(self, name, bits):
        text = self.get(name)
        try:
            number = int(text)
        except ValueError:
            raise ValueError("option %r value %r is not an integer" % (name, text)) from None
        if not -(1 << (bits - 1)) <= number < 1 << (bits - 1):
            raise OverflowError("option %r value %r does not fit in %d bits" % (name, text, bits))
        return number

    def get_int(self, name, /):
        """
        Return get(name) as a 32-bit integer.

        Raises ValueError on non-numeric text and OverflowError outside the
        signed 32-bit range.
        """
        return self._integer(name, 32)

    def get_int64(self, name, /):
        """
        Return get(name) as a 64-bit integer (same failure policy as get_int).
        """
        return self._integer(name, 64)

    # ── Help ────────────────────────────────────────────────────────────────

    def show_help(self, depth=0, /):
        """
        Render help for this node to the console and set helped.

        Layout
        - depth 0: usage text as declared (first line, then the wrapped detail),
          the commands table (name + spec, short usage), then the options table.
        - depth > 0: "usage: <route> <spec>", the command's usage text, then
          its options table.

        Options are sorted by long name; value options with a non-empty
        default show it in parentheses. Text wraps at 80 columns.

        Palette keys
        - usage-label, program-name, usage-section, description-section
        - group-label, option-name, command-name, argument-description, default
        - panel-title

        Customization
        - Define a mapping named __styles__ in __main__ to override any palette entry.
        """
        styles = defaultdict(str, {
            "usage-label": "bold #00E6FF",
            "program-name": "bold #FF4D94",
            "usage-section": "bold #36C5F0",
            "description-section": "italic #A3A3A3",
            "group-label": "bold #FFFFFF",
            "option-name": "bold #00E6FF",
            "command-name": "bold #36C5F0",
            "argument-description": "#9CA3AF",
            "default": "bold #FFD600",
            "panel-title": "bold #FF4D94",
        } | getattr(__import__("__main__"), "__styles__", {}))

        def styler(style):
            return styles[style] if self.colorful else ""

        head, _, detail = self.usage.partition("\n")
        renders = []

        if depth > 0:
            usage = Text()
            usage.append("usage", styler("usage-label")).append(": ")
            usage.append(self.route, styler("program-name"))
            if self.spec:
                usage.append(" ").append(self.spec, styler("usage-section"))
            renders.append(usage)
            if head:
                renders.append(Text("\n".join(wrap(head, 0, WIDTH)), styler("description-section")))
        elif head:
            renders.append(Text("\n".join(wrap(head, 0, WIDTH)), styler("usage-section")))

        if detail:
            renders.append(Text("\n".join(wrap(detail, 0, WIDTH)), styler("description-section")))

        if self._children and depth == 0:
            table = Text()
            table.append("commands", styler("group-label")).append(":")
            labels = [" ".join(filter(None, (child.name, child.spec))) for child in self._children]
            column = max(map(len, labels))
            for label, child in zip(labels, self._children):
                table.append("\n  ").append(label.ljust(column), styler("command-name")).append("  ")
                table.append("\n".join(wrap(child.usage.partition("\n")[0], column + 4, WIDTH)), styler("argument-description"))
            renders.append(table)

        if self._options:
            table = Text()
            table.append("options", styler("group-label")).append(":")
            column = max(len(option.long) for option in self._options)
            for option in sorted(self._options, key=lambda x: x.long):
                table.append("\n")
                if option.short:
                    table.append(" ").append("-" + option.short, styler("option-name")).append(" ")
                else:
                    table.append("    ")
                table.append(("--" + option.long).ljust(column + 2), styler("option-name")).append(" ")
                descr = str(option.descr)
                if option.valued and option.default:
                    descr = f"{descr} ({option.default})" if descr else f"({option.default})"
                table.append("\n".join(wrap(descr, column + 7, WIDTH)), styler("argument-description"))
            renders.append(table)

        renderable = Group(*renders)
        if self.fancy:
            renderable = Panel(
                renderable,
                title=Text.assemble("[", " ", f"{self.route} HELP".upper(), " ", "]", style=styler("panel-title")),
                title_align="left",
            )

        console.print(renderable, soft_wrap=True, highlight=False)
        self._helped = True


def parser(usage="", /, **options):
    """
    Build a root node; options are forwarded to Node (spec, route, colorful, ...).
    """
    return Node(usage, **options)


def invoke(node, prompt=Unset, /):
    """
    Parse `prompt` with `node` and dispatch to the chosen command.

    Returns
    - 1 when parsing failed (including when help was shown; see node.helped).
    - the handler's result when the tree declares commands.
    - 0 otherwise.
    """
    if not isinstance(node, Node):
        raise TypeError("invoke() first argument must be a node")
    if not node.parse(prompt):
        return 1
    if node.children:
        return node.exec_command()
    return 0


__all__ = (
    "Node",
    "parser",
    "invoke",
    "HELPERS",
)

# Not part of the public API.
del NodeType
