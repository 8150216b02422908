# -*- test-case-name: gumball._test.test_core -*-

"""
A core state-machine abstraction.

An L{Automaton} is the declaration: a table of transitions.  A
L{Transitioner} is the combination of that table and a current state.
"""

import logging
from itertools import chain

logger = logging.getLogger(__name__)


class NoTransition(Exception):
    """
    A finite state machine in C{state} has no transition for C{symbol}.

    @param state: the finite state machine's state at the time of the
        illegal transition.

    @param symbol: the input symbol for which no transition exists.
    """

    def __init__(self, state, symbol):
        self.state = state
        self.symbol = symbol
        super(NoTransition, self).__init__(
            "no transition for {} in {}".format(symbol, state)
        )


class Automaton(object):
    """
    A declaration of a finite state machine.

    Note that this is not the machine itself; it is shared by every
    machine that uses it and must not change once those machines exist.
    """

    def __init__(self, initialStates=()):
        """
        Initialize the set of transitions and the initial states.

        @param initialStates: the states a new machine may start in.
        """
        self._initialStates = frozenset(initialStates)
        self._transitions = {}


    @property
    def initialStates(self):
        """
        Return the states a machine may begin in.
        """
        return self._initialStates


    def addTransition(self, inState, inputSymbol, outState, outputSymbols):
        """
        Add the given transition to the outputSymbol. Raise ValueError if
        there is already a transition with the same inState and inputSymbol.

        :param Hashable inState:
        :param Hashable inputSymbol:
        :param Hashable outState:
        :param Sequence[Output] outputSymbols:
        """
        key = (inState, inputSymbol)
        if key in self._transitions:
            raise ValueError(
                "already have transition from {} via {}".format(inState,
                                                                inputSymbol))
        self._transitions[key] = (outState, tuple(outputSymbols))


    def allTransitions(self):
        """
        All transitions.
        """
        return frozenset(
            (inState, inputSymbol, outState, outputSymbols)
            for (inState, inputSymbol), (outState, outputSymbols)
            in self._transitions.items()
        )


    def inputAlphabet(self):
        """
        The full set of symbols acceptable to this automaton.
        """
        return set(inputSymbol for (inState, inputSymbol) in self._transitions)


    def outputAlphabet(self):
        """
        The full set of symbols which can be produced by this automaton.
        """
        return set(
            chain.from_iterable(
                outputSymbols for (outState, outputSymbols)
                in self._transitions.values()
            )
        )


    def states(self):
        """
        All valid states;
        "Q" in the mathematical description of a state machine.
        """
        return frozenset(
            chain.from_iterable(
                (inState, outState)
                for (inState, inputSymbol), (outState, outputSymbols)
                in self._transitions.items()
            )
        )


    def missingTransitions(self, states, inputSymbols):
        """
        Find every combination of C{states} and C{inputSymbols} that has no
        transition.

        :rtype: List[Tuple[Hashable, Hashable]]
        """
        return [(state, inputSymbol)
                for state in states
                for inputSymbol in inputSymbols
                if (state, inputSymbol) not in self._transitions]


    def checkComplete(self, states, inputSymbols):
        """
        Raise ValueError unless every state has a transition for every one of
        C{inputSymbols}.
        """
        missing = self.missingTransitions(states, inputSymbols)
        if missing:
            raise ValueError(
                "no transitions declared for {}".format(
                    ", ".join("{} via {}".format(state, inputSymbol)
                              for state, inputSymbol in missing)))


    def outputForInput(self, currentState, inputSymbol):
        """
        Find the ending state and outputs
        that correspond to the given starting state and input.

        :param Hashable currentState: The current state of the machine.
        :param Hashable inputSymbol:
        :rtype: Tuple[Hashable, List[Output]]
        :raises NoTransition: if there is no match
            for the starting state and input pair.
        """
        try:
            outState, outputSymbols = self._transitions[(currentState,
                                                         inputSymbol)]
        except KeyError:
            raise NoTransition(state=currentState, symbol=inputSymbol)
        return (outState, list(outputSymbols))


class Transitioner(object):
    """
    The combination of a current state and an L{Automaton}.
    """

    def __init__(self, automaton, initialState):
        if initialState not in automaton.initialStates:
            raise ValueError(
                "{} is not an initial state".format(initialState))
        self._automaton = automaton
        self._state = initialState
        self._tracer = None

    @property
    def state(self):
        return self._state

    def setTrace(self, tracer):
        self._tracer = tracer

    def transition(self, inputSymbol):
        """
        Transition between states, returning any outputs.

        The new state is entered before the outputs are returned, so an
        output may provide another input to the same transitioner.

        :param Hashable inputSymbol:
        :rtype: Tuple[List[Output], Optional[Callable]]
        """
        oldState = self._state
        outState, outputSymbols = self._automaton.outputForInput(oldState,
                                                                 inputSymbol)
        logger.debug("%s --%s--> %s", oldState, inputSymbol, outState)
        outTracer = None
        if self._tracer:
            outTracer = self._tracer(oldState, inputSymbol, outState)
        self._state = outState
        return (outputSymbols, outTracer)
