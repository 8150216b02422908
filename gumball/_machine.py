# -*- test-case-name: gumball._test.test_machine -*-

"""
A gumball machine: four states, four inputs, one transition table.
"""

import logging
from enum import Enum

import attr

from ._core import Automaton, Transitioner

logger = logging.getLogger(__name__)

REFILL_COUNT = 10


class State(Enum):
    """
    The states a L{GumballMachine} can be in.
    """
    SoldOut = "soldOut"
    NoQuarter = "noQuarter"
    HasQuarter = "hasQuarter"
    Sold = "sold"


class Input(Enum):
    """
    The inputs a L{GumballMachine} understands.

    C{stocked} and C{emptied} are only ever provided by the machine itself,
    to leave the C{Sold} state once a gumball has come out.
    """
    insertQuarter = "insertQuarter"
    ejectQuarter = "ejectQuarter"
    turnCrank = "turnCrank"
    dispense = "dispense"
    stocked = "stocked"
    emptied = "emptied"


PUBLIC_INPUTS = (
    Input.insertQuarter,
    Input.ejectQuarter,
    Input.turnCrank,
    Input.dispense,
)


@attr.s(frozen=True)
class Output(object):
    """
    Something a L{GumballMachine} does while taking a transition.
    """
    _method = attr.ib()

    def _name(self):
        return self._method.__name__.lstrip("_")

    def __call__(self, machine):
        """
        Call the underlying function with the machine.
        """
        return self._method(machine)


def _say(name, message):
    """
    Make an L{Output} that emits C{message}.
    """
    def say(machine):
        machine._emit(message)
    say.__name__ = name
    return Output(say)


_noMoreGumballs = _say("noMoreGumballs", "Hey there are no more gumballs")
_cannotEjectNothing = _say(
    "cannotEjectNothing",
    "Sorry, you can't eject because you haven't inserted a quarter yet.")
_crankWithNoGumballs = _say("crankWithNoGumballs",
                            "You turned but there are no Gumballs.")

_quarterInserted = _say("quarterInserted", "You have inserted a quarter")
_noQuarterToEject = _say("noQuarterToEject",
                         "You have not inserted a quarter")
_crankWithNoQuarter = _say("crankWithNoQuarter",
                           "You turned but there's no quarter.")
_payFirst = _say("payFirst", "You need to pay first.")

_anotherQuarter = _say("anotherQuarter",
                       "You cannot insert another quarter.")
_quarterReturned = _say("quarterReturned", "Quarter returned.")
_crankTurned = _say("crankTurned", "You turned the crank")
_noGumballDispensed = _say("noGumballDispensed", "No Gumball Dispensed")

_pleaseWait = _say("pleaseWait",
                   "Please wait we are already giving you a gumball.")
_alreadyTurned = _say("alreadyTurned", "Sorry you already turned the crank.")
_turningTwice = _say("turningTwice", "Turning twice does nothing.")


@Output
def _dispensedWhileSoldOut(machine):
    message = "Sold out should never be the current state when dispensing."
    logger.warning("dispense requested with %d gumballs: %s",
                   machine.count, message)
    machine._emit(message)


@Output
def _dispenseNow(machine):
    machine.dispense()


@Output
def _takeGumball(machine):
    machine._count -= 1
    machine.releaseBall()


@Output
def _settle(machine):
    if machine.count > 0:
        machine._provide(Input.stocked)
    else:
        machine._provide(Input.emptied)


_TRANSITIONS = [
    # state            input                out-state         outputs
    (State.SoldOut,    Input.insertQuarter, State.SoldOut,    [_noMoreGumballs]),
    (State.SoldOut,    Input.ejectQuarter,  State.SoldOut,    [_cannotEjectNothing]),
    (State.SoldOut,    Input.turnCrank,     State.SoldOut,    [_crankWithNoGumballs]),
    (State.SoldOut,    Input.dispense,      State.SoldOut,    [_dispensedWhileSoldOut]),

    (State.NoQuarter,  Input.insertQuarter, State.HasQuarter, [_quarterInserted]),
    (State.NoQuarter,  Input.ejectQuarter,  State.NoQuarter,  [_noQuarterToEject]),
    (State.NoQuarter,  Input.turnCrank,     State.NoQuarter,  [_crankWithNoQuarter]),
    (State.NoQuarter,  Input.dispense,      State.NoQuarter,  [_payFirst]),

    (State.HasQuarter, Input.insertQuarter, State.HasQuarter, [_anotherQuarter]),
    (State.HasQuarter, Input.ejectQuarter,  State.NoQuarter,  [_quarterReturned]),
    (State.HasQuarter, Input.turnCrank,     State.Sold,       [_crankTurned,
                                                               _dispenseNow]),
    (State.HasQuarter, Input.dispense,      State.HasQuarter, [_noGumballDispensed]),

    (State.Sold,       Input.insertQuarter, State.Sold,       [_pleaseWait]),
    (State.Sold,       Input.ejectQuarter,  State.Sold,       [_alreadyTurned]),
    (State.Sold,       Input.turnCrank,     State.Sold,       [_turningTwice]),
    (State.Sold,       Input.dispense,      State.Sold,       [_takeGumball,
                                                               _settle]),
    (State.Sold,       Input.stocked,       State.NoQuarter,  []),
    (State.Sold,       Input.emptied,       State.SoldOut,    []),
]


def buildAutomaton(transitions=_TRANSITIONS):
    """
    Build the L{Automaton} for a gumball machine from a list of
    C{(state, input, out-state, outputs)} rows.

    @raise ValueError: if two rows share a state and input, or if some state
        does not handle every public input.
    """
    automaton = Automaton(initialStates=[State.SoldOut, State.NoQuarter])
    for inState, inputSymbol, outState, outputs in transitions:
        automaton.addTransition(inState, inputSymbol, outState, outputs)
    automaton.checkComplete(list(State), PUBLIC_INPUTS)
    return automaton


gumballAutomaton = buildAutomaton()


class GumballMachine(object):
    """
    A machine that sells a gumball for a quarter.

    Every input is answered, whatever the state: an input that makes no
    sense right now just emits a message saying so.

    @ivar count: the number of gumballs left.
    @ivar state: the current L{State}.
    """

    def __init__(self, count=0, emit=print):
        """
        @param count: the number of gumballs to start with.

        @param emit: called with each message the machine produces.
        """
        if count < 0:
            raise ValueError(
                "a gumball machine cannot hold {} gumballs".format(count))
        self._count = count
        self._emit = emit
        if count > 0:
            initialState = State.NoQuarter
        else:
            initialState = State.SoldOut
        self._transitioner = Transitioner(gumballAutomaton, initialState)

    @property
    def count(self):
        return self._count

    @property
    def state(self):
        return self._transitioner.state

    def setTrace(self, tracer):
        """
        Call C{tracer(oldState, input, newState)} on every transition.

        If C{tracer} returns a callable, it is called with the name of each
        output the transition produces.  Pass C{None} to stop tracing.
        """
        self._transitioner.setTrace(tracer)

    def _provide(self, inputSymbol):
        outputs, outTracer = self._transitioner.transition(inputSymbol)
        for output in outputs:
            if outTracer:
                outTracer(output._name())
            output(self)

    def insertQuarter(self):
        "A quarter was put in the slot."
        self._provide(Input.insertQuarter)

    def ejectQuarter(self):
        "The coin return lever was pulled."
        self._provide(Input.ejectQuarter)

    def turnCrank(self):
        "The crank was turned."
        self._provide(Input.turnCrank)

    def dispense(self):
        """
        Let a gumball out.  Turning the crank with a quarter in does this; in
        any other state it only explains why nothing happened.
        """
        self._provide(Input.dispense)

    def releaseBall(self):
        self._emit("A ball comes rolling out.")

    def refill(self):
        """
        Fill the machine back up to L{REFILL_COUNT} gumballs.

        The state is left alone, so a sold-out machine stays sold out.
        """
        self._count = REFILL_COUNT

    def describe(self):
        """
        Describe the machine's inventory and whether it is ready for a
        quarter.

        @rtype: L{str}
        """
        lines = ["Gumball Machine",
                 "inventory {}".format(self._count)]
        if self._count > 0:
            lines.append("Machine is ready for your quarter")
        else:
            lines.append("Ooops no more gumballs")
        return "\n".join(lines)

    def __str__(self):
        return self.describe()

    @classmethod
    def asDigraph(cls):
        """
        Generate a L{graphviz.Digraph} that represents the states and
        transitions every gumball machine shares.

        @return: L{graphviz.Digraph} object; for more information, please
            see the documentation for
            U{graphviz<https://graphviz.readthedocs.io/>}
        """
        from ._visualize import makeDigraph
        return makeDigraph(gumballAutomaton,
                           inputAsString=lambda inputSymbol: inputSymbol.value,
                           outputAsString=lambda output: output._name(),
                           stateAsString=lambda state: state.name)

    def __repr__(self):
        return "<GumballMachine count={} state={}>".format(self._count,
                                                            self.state.name)
