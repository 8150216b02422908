"""
Tests for the C{gumball-demo} command line tool.
"""
import logging
from unittest import TestCase

from .._demo import run, tool
from .._machine import State


class RunTests(TestCase):
    """
    Tests for L{run}.
    """

    def test_sellsFive(self):
        """
        The demonstration sells all five gumballs, describing the machine
        between sales, and leaves it sold out.
        """
        printed = []
        machine = run(_print=printed.append)
        self.assertEqual((machine.state, machine.count), (State.SoldOut, 0))
        self.assertEqual(printed.count("A ball comes rolling out."), 5)
        self.assertEqual(printed[0],
                         "Gumball Machine\n"
                         "inventory 5\n"
                         "Machine is ready for your quarter")
        self.assertEqual(printed[-1],
                         "Gumball Machine\n"
                         "inventory 0\n"
                         "Ooops no more gumballs")

    def test_runsOut(self):
        """
        With fewer gumballs than sales, the later quarters meet a sold-out
        machine.
        """
        printed = []
        machine = run(2, _print=printed.append)
        self.assertEqual(machine.state, State.SoldOut)
        self.assertEqual(printed.count("A ball comes rolling out."), 2)
        self.assertIn("Hey there are no more gumballs", printed)


class ToolTests(TestCase):
    """
    Tests for L{tool}.
    """

    def setUp(self):
        self.runs = []

    def fakeRun(self, count, _print):
        self.runs.append(count)
        _print("ran")

    def test_defaultCount(self):
        printed = []
        tool(_argv=[], _run=self.fakeRun, _print=printed.append)
        self.assertEqual(self.runs, [5])
        self.assertEqual(printed, ["ran"])

    def test_count(self):
        tool(_argv=["--count", "3"], _run=self.fakeRun,
             _print=lambda *args: None)
        self.assertEqual(self.runs, [3])

    def test_quiet(self):
        printed = []
        tool(_argv=["-q"], _run=self.fakeRun, _print=printed.append)
        self.assertEqual(printed, [])

    def test_negativeCount(self):
        """
        A negative count is a usage error.
        """
        self.assertRaises(SystemExit, tool, _argv=["--count", "-1"],
                          _run=self.fakeRun)
        self.assertEqual(self.runs, [])

    def test_verbose(self):
        """
        C{--verbose} turns on DEBUG logging; without it logging is left
        alone.
        """
        configured = []
        tool(_argv=[], _run=self.fakeRun, _print=lambda *args: None,
             _basicConfig=lambda **kw: configured.append(kw))
        self.assertEqual(configured, [])
        tool(_argv=["--verbose"], _run=self.fakeRun,
             _print=lambda *args: None,
             _basicConfig=lambda **kw: configured.append(kw))
        self.assertEqual(configured, [{"level": logging.DEBUG}])
