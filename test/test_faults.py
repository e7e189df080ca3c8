"""
Faults module tests (codes, records, rendering, host overrides).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import copy
import io
import sys
import unittest
from unittest import TestCase, mock

from rich.console import Console

from argtree import faults
from argtree.faults import (
    FaultCode,
    ParserException,
    ParserWarning,
    SwitchValueWarning,
    UnknownOptionError,
    getdoc,
    trigger,
)


def _fault(**options):
    return UnknownOptionError(
        "unknown option '-bad' at first position",
        title="unknown option",
        code=FaultCode.UNKNOWN_OPTION,
        hint="run 'tool --help' to see all options",
        **options,
    )


def _print(renderable):
    console = Console(file=io.StringIO(), width=80, color_system=None)
    console.print(renderable, soft_wrap=True, highlight=False)
    return console.file.getvalue()


class TestFaultCode(TestCase):
    def testNormalizeDefaultsToNumber(self):
        self.assertEqual(FaultCode.UNKNOWN_OPTION.normalize(), "21111")

    def testNormalizeUsesHostLabels(self):
        with mock.patch.object(sys.modules["__main__"], "__codes__", {FaultCode.UNKNOWN_OPTION: "E-OPT"}, create=True):
            self.assertEqual(FaultCode.UNKNOWN_OPTION.normalize(), "E-OPT")
            self.assertEqual(FaultCode.MISSING_VALUE.normalize(), "21113")

    def testGetdoc(self):
        self.assertIsNone(getdoc(FaultCode.NO_COMMAND))
        with mock.patch.object(sys.modules["__main__"], "__docs__", {FaultCode.NO_COMMAND: "pick one"}, create=True):
            self.assertEqual(getdoc(FaultCode.NO_COMMAND), "pick one")
        with self.assertRaises(TypeError):
            getdoc(21121)


class TestRecords(TestCase):
    def testHierarchy(self):
        self.assertIsInstance(_fault(), ParserException)
        self.assertIsInstance(_fault(), Exception)
        self.assertIsInstance(SwitchValueWarning("x"), ParserWarning)
        self.assertIsInstance(SwitchValueWarning("x"), Warning)

    def testMessageAndOptions(self):
        fault = _fault(input="-bad")
        self.assertEqual(str(fault), "unknown option '-bad' at first position")
        self.assertIs(fault.code, FaultCode.UNKNOWN_OPTION)
        self.assertEqual(fault.options["input"], "-bad")
        with self.assertRaises(TypeError):
            fault.options["input"] = "-good"

    def testReplaceMergesOptions(self):
        fault = copy.replace(_fault(input="-bad"), quiet=True, prog="tool")
        self.assertIsInstance(fault, UnknownOptionError)
        self.assertEqual(fault.message, "unknown option '-bad' at first position")
        self.assertEqual(fault.options["input"], "-bad")
        self.assertTrue(fault.options["quiet"])
        self.assertEqual(fault.options["prog"], "tool")


class TestRendering(TestCase):
    def testPlainLayout(self):
        lines = _print(_fault(prog="tool")).splitlines()
        self.assertEqual(lines[0], "[ tool — 21111 | Unknown Option ]")
        self.assertEqual(lines[1], "unknown option '-bad' at first position")
        self.assertEqual(lines[2], " → run 'tool --help' to see all options")

    def testHostProgramName(self):
        with mock.patch.object(sys.modules["__main__"], "__prog__", "other", create=True):
            self.assertIn("[ other — 21111", _print(_fault(prog="tool")))

    def testFancyLayout(self):
        output = _print(_fault(prog="tool", fancy=True))
        self.assertIn("tool — 21111 | Unknown Option", output)
        self.assertIn("unknown option '-bad' at first position", output)
        self.assertIn("╭", output)

    def testWarningTitle(self):
        output = _print(SwitchValueWarning("cannot use get() on switch 'f'", code=FaultCode.SWITCH_VALUE, prog="tool"))
        self.assertIn("| Warning ]", output)


class TestTrigger(TestCase):
    def testPrintsAndReturnsMergedFault(self):
        with faults.console.capture() as capture:
            fault = trigger(_fault(), prog="tool")
        self.assertEqual(fault.options["prog"], "tool")
        self.assertIn("unknown option '-bad'", capture.get())

    def testQuiet(self):
        with faults.console.capture() as capture:
            fault = trigger(_fault(), quiet=True)
        self.assertEqual(capture.get(), "")
        self.assertTrue(fault.options["quiet"])

    def testRejectsPlainObjects(self):
        with self.assertRaises(TypeError):
            trigger(object())


if __name__ == "__main__":
    unittest.main()
