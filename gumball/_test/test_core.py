
from .._core import Automaton, NoTransition, Transitioner

from unittest import TestCase

class CoreTests(TestCase):
    """
    Tests for the (private, implementation detail) core.
    """

    def test_noOutputForInput(self):
        """
        L{Automaton.outputForInput} raises L{NoTransition} if no
        transition for that input is defined.
        """
        a = Automaton()
        with self.assertRaises(NoTransition) as cm:
            a.outputForInput("no-state", "no-symbol")
        self.assertEqual(cm.exception.state, "no-state")
        self.assertEqual(cm.exception.symbol, "no-symbol")
        self.assertEqual(str(cm.exception),
                         "no transition for no-symbol in no-state")


    def test_oneTransition(self):
        """
        L{Automaton.addTransition} adds its input symbol to
        L{Automaton.inputAlphabet}, all its outputs to
        L{Automaton.outputAlphabet}, and causes L{Automaton.outputForInput} to
        start returning the new state and output symbols.
        """
        a = Automaton()
        a.addTransition("beginning", "begin", "ending", ["end"])
        self.assertEqual(a.inputAlphabet(), set(["begin"]))
        self.assertEqual(a.outputAlphabet(), set(["end"]))
        self.assertEqual(a.outputForInput("beginning", "begin"),
                         ("ending", ["end"]))
        self.assertEqual(a.states(), set(["beginning", "ending"]))
        self.assertEqual(a.allTransitions(),
                         frozenset([("beginning", "begin", "ending",
                                     ("end",))]))


    def test_duplicateTransition(self):
        """
        L{Automaton.addTransition} raises L{ValueError} when a transition
        from the same state via the same input has already been added.
        """
        a = Automaton()
        a.addTransition("beginning", "begin", "ending", [])
        with self.assertRaises(ValueError) as cm:
            a.addTransition("beginning", "begin", "beginning", [])
        self.assertIn("already have transition from beginning via begin",
                      str(cm.exception))


    def test_checkComplete(self):
        """
        L{Automaton.checkComplete} names every state and input combination
        without a transition, and passes quietly once there are none.
        """
        a = Automaton()
        a.addTransition("up", "flip", "down", [])
        self.assertEqual(a.missingTransitions(["up", "down"], ["flip"]),
                         [("down", "flip")])
        with self.assertRaises(ValueError) as cm:
            a.checkComplete(["up", "down"], ["flip"])
        self.assertIn("down via flip", str(cm.exception))
        a.addTransition("down", "flip", "up", [])
        a.checkComplete(["up", "down"], ["flip"])


class TransitionerTests(TestCase):
    """
    Tests for L{Transitioner}.
    """

    def setUp(self):
        self.automaton = Automaton(initialStates=["up"])
        self.automaton.addTransition("up", "flip", "down", ["thud"])
        self.automaton.addTransition("down", "flip", "up", [])

    def test_initialStateMustBeDeclared(self):
        """
        A L{Transitioner} may only start in one of its automaton's initial
        states.
        """
        self.assertRaises(ValueError, Transitioner, self.automaton, "down")

    def test_transition(self):
        """
        L{Transitioner.transition} moves to the new state and returns the
        outputs for the transition.
        """
        t = Transitioner(self.automaton, "up")
        self.assertEqual(t.transition("flip"), (["thud"], None))
        self.assertEqual(t.state, "down")
        self.assertEqual(t.transition("flip"), ([], None))
        self.assertEqual(t.state, "up")

    def test_noTransitionKeepsState(self):
        """
        An input with no transition raises L{NoTransition} and leaves the
        state where it was.
        """
        t = Transitioner(self.automaton, "up")
        self.assertRaises(NoTransition, t.transition, "kick")
        self.assertEqual(t.state, "up")

    def test_tracer(self):
        """
        The tracer sees the old state, the input and the new state, and
        whatever it returns comes back alongside the outputs.
        """
        traces = []
        record = traces.append
        def tracer(old, input, new):
            record((old, input, new))
            return record
        t = Transitioner(self.automaton, "up")
        t.setTrace(tracer)
        outputs, outTracer = t.transition("flip")
        self.assertEqual(traces, [("up", "flip", "down")])
        self.assertIs(outTracer, record)

    def test_logsEachTransition(self):
        """
        Every transition is logged at DEBUG level with the old state, the
        input and the new state.
        """
        t = Transitioner(self.automaton, "up")
        with self.assertLogs("gumball._core", level="DEBUG") as cm:
            t.transition("flip")
            t.transition("flip")
        self.assertEqual(cm.output, [
            "DEBUG:gumball._core:up --flip--> down",
            "DEBUG:gumball._core:down --flip--> up",
        ])
