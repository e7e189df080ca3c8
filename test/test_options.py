"""
Options module behavioral tests (declaration, matching, per-parse state).

Conventions
- Test method names follow CamelCase per project convention.
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from argtree import Option, Switch, Value


class TestSwitch(TestCase):
    """Behavioral tests for presence-only options."""

    def testDeclaration(self):
        switch = Switch("f", "force", "Force a thing")
        self.assertEqual(switch.short, "f")
        self.assertEqual(switch.long, "force")
        self.assertEqual(switch.descr, "Force a thing")
        self.assertFalse(switch.valued)
        self.assertEqual(switch.default, "0")
        self.assertIsInstance(switch, Option)

    def testNames(self):
        self.assertEqual(Switch("f", "force").names(), ("-f", "--force"))
        self.assertEqual(Switch("", "force").names(), ("--force",))

    def testMatchesCommandLineSpellings(self):
        switch = Switch("f", "force")
        self.assertTrue(switch.matches("-f"))
        self.assertTrue(switch.matches("--force"))
        self.assertFalse(switch.matches("-force"))
        self.assertFalse(switch.matches("--f"))
        self.assertFalse(switch.matches("force"))

    def testNamedByBareNames(self):
        switch = Switch("f", "force")
        self.assertTrue(switch.named("f"))
        self.assertTrue(switch.named("force"))
        self.assertFalse(switch.named("-f"))
        self.assertFalse(Switch("", "force").named(""))

    def testToggleAndReset(self):
        switch = Switch("f", "force")
        switch.toggle()
        self.assertTrue(switch.toggled)
        self.assertEqual(switch.value, "")
        switch.reset()
        self.assertFalse(switch.toggled)

    def testStateIsReadOnly(self):
        switch = Switch("f", "force")
        with self.assertRaises(AttributeError):
            switch.toggled = True

    def testRepr(self):
        self.assertTrue(repr(Switch("f", "force")).startswith("switch(short='f', long='force'"))


class TestValue(TestCase):
    """Behavioral tests for value-bearing options."""

    def testDefaultValue(self):
        value = Value("c", "count", "Max count", "7")
        self.assertTrue(value.valued)
        self.assertEqual(value.default, "7")
        self.assertEqual(value.current(), "7")

    def testDefaultsToEmpty(self):
        self.assertEqual(Value("o", "outfile").default, "")

    def testToggleStoresValue(self):
        value = Value("o", "outfile")
        value.toggle("myfile")
        self.assertTrue(value.toggled)
        self.assertEqual(value.current(), "myfile")
        value.reset()
        self.assertEqual(value.value, "")
        self.assertEqual(value.current(), "")

    def testNamesAreStripped(self):
        value = Value(" o ", " outfile ")
        self.assertEqual((value.short, value.long), ("o", "outfile"))


class TestOptionMetadata(TestCase):
    """Type and emptiness checks at declaration time."""

    def testLongNameRequired(self):
        with self.assertRaises(ValueError):
            Switch("f", "  ")

    def testNamesMustBeStrings(self):
        with self.assertRaises(TypeError):
            Switch(1, "force")
        with self.assertRaises(TypeError):
            Switch("f", None)

    def testDefaultMustBeString(self):
        with self.assertRaises(TypeError):
            Value("c", "count", "Max count", 7)

    def testLongShortNamesAreLeftToValidation(self):
        # multi-character short names are rejected when the owning node parses
        self.assertEqual(Switch("ff", "force").short, "ff")


if __name__ == "__main__":
    unittest.main()
