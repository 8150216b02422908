# -*- test-case-name: gumball._test.test_demo -*-
import argparse
import logging
import sys

from ._machine import GumballMachine


def run(count=5, _print=print):
    """
    Sell a few gumballs, describing the machine between sales.

    @param count: the number of gumballs the machine starts with.

    @param _print: where messages and descriptions go.

    @return: the machine, once the demonstration is over.
    """
    machine = GumballMachine(count, emit=_print)

    _print(machine.describe())

    machine.insertQuarter()
    machine.turnCrank()

    _print(machine.describe())

    machine.insertQuarter()
    machine.turnCrank()
    machine.insertQuarter()
    machine.turnCrank()

    _print(machine.describe())

    machine.insertQuarter()
    machine.turnCrank()
    _print(machine.describe())

    machine.insertQuarter()
    machine.turnCrank()
    _print(machine.describe())

    return machine


def tool(_progname=sys.argv[0],
         _argv=sys.argv[1:],
         _run=run,
         _print=print,
         _basicConfig=logging.basicConfig):
    """
    Entry point for command line utility.
    """
    argumentParser = argparse.ArgumentParser(
        prog=_progname,
        description="Run a gumball machine through a few sales.")
    argumentParser.add_argument('--count', '-c',
                                help="How many gumballs to start with.",
                                type=int,
                                default=5)
    argumentParser.add_argument('--quiet', '-q',
                                help="suppress output",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--verbose', '-v',
                                help="log each transition at DEBUG level",
                                default=False,
                                action="store_true")
    args = argumentParser.parse_args(_argv)

    if args.count < 0:
        argumentParser.error("--count must not be negative")

    if args.verbose:
        _basicConfig(level=logging.DEBUG)

    if args.quiet:
        def _print(*args):
            pass

    _run(args.count, _print=_print)
