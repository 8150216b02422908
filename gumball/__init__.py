# -*- test-case-name: gumball -*-
from ._core import NoTransition
from ._machine import (
    GumballMachine,
    Input,
    REFILL_COUNT,
    State,
    gumballAutomaton,
)

__all__ = [
    'GumballMachine',
    'Input',
    'NoTransition',
    'REFILL_COUNT',
    'State',
    'gumballAutomaton',
]
