import concurrent.futures as conc
import dataclasses
import unittest

from naiveregex import AmbiguousTransition, DFAModel, Outcome, UnknownTransition


class DFATest(unittest.TestCase):
    @staticmethod
    def sample_dfa() -> DFAModel[int, str]:
        return DFAModel(1, {2}, [(1, 'a', 1), (1, 'b', 2), (2, 'c', 2)])

    def test_visit(self) -> None:
        r = self.sample_dfa().runtime()
        self.assertEqual(r.state, 1)
        self.assertFalse(r.accepted())
        r.read_symbol('a')
        self.assertFalse(r.accepted())
        r.read_symbol('b')
        self.assertTrue(r.accepted())
        self.assertEqual(r.state, 2)
        r.read_sequence('cc')
        self.assertTrue(r.accepted())

    def test_unknown_transition(self) -> None:
        r = self.sample_dfa().runtime()
        r.read_symbol('a')
        with self.assertRaises(UnknownTransition) as cm:
            r.read_symbol('c')
        self.assertEqual(cm.exception.state, 1)
        self.assertEqual(cm.exception.symbol, 'c')
        self.assertIn("'c'", cm.exception.message)
        # the cursor did not move
        self.assertEqual(r.state, 1)

    def test_read_sequence_stops_at_failure(self) -> None:
        r = self.sample_dfa().runtime()
        with self.assertRaises(UnknownTransition):
            r.read_sequence('abab')
        self.assertEqual(r.state, 2)

    def test_accepts(self) -> None:
        dfa = self.sample_dfa()
        self.assertTrue(dfa.accepts("aabcc"))
        self.assertTrue(dfa.accepts("aab"))
        self.assertTrue(dfa.accepts(iter(['b', 'c'])))
        self.assertFalse(dfa.accepts("aa"))
        self.assertFalse(dfa.accepts(""))
        with self.assertRaises(UnknownTransition):
            dfa.accepts("c")
        with self.assertRaises(UnknownTransition):
            dfa.accepts("abb")

    def test_run(self) -> None:
        dfa = self.sample_dfa()
        self.assertEqual(dfa.run("aabcc"), Outcome.ACCEPTED)
        self.assertEqual(dfa.run("aa"), Outcome.REJECTED)
        self.assertEqual(dfa.run(""), Outcome.REJECTED)
        self.assertEqual(dfa.run("c"), Outcome.MALFORMED)

    def test_run_logs_malformed(self) -> None:
        with self.assertLogs('naiveregex', level='DEBUG') as cm:
            self.sample_dfa().run("ac")
        self.assertTrue(any("no transition from state 1" in line for line in cm.output))

    def test_repeatable(self) -> None:
        """A fresh runtime is used for every call."""
        dfa = self.sample_dfa()
        for _ in range(3):
            self.assertTrue(dfa.accepts("ab"))
            self.assertFalse(dfa.accepts("a"))

    def test_concurrent(self) -> None:
        dfa = self.sample_dfa()
        inputs = ["a" * n + "b" + "c" * n for n in range(50)] + ["a" * n for n in range(50)]
        with conc.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(dfa.accepts, inputs))
        self.assertEqual(results, [True] * 50 + [False] * 50)

    def test_ambiguous(self) -> None:
        with self.assertRaises(AmbiguousTransition) as cm:
            DFAModel(1, {2}, [(1, 'a', 1), (1, 'a', 2)])
        self.assertEqual((cm.exception.state, cm.exception.symbol), (1, 'a'))

        with self.assertRaises(AmbiguousTransition) as cm:
            DFAModel(1, {2}, [(1, None, 2)])
        self.assertIsNone(cm.exception.symbol)
        self.assertIn("epsilon", cm.exception.message)

    def test_duplicate_rules(self) -> None:
        """Identical rules are not an ambiguity."""
        dfa = DFAModel(1, {2}, [(1, 'a', 2), (1, 'a', 2)])
        self.assertEqual(len(dfa.transitions), 1)
        self.assertTrue(dfa.accepts("a"))

    def test_immutable(self) -> None:
        dfa = self.sample_dfa()
        self.assertIsInstance(dfa.accept_states, frozenset)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            dfa.start_state = 2     # type: ignore

    def test_none_state(self) -> None:
        """None is a state like any other, not a missing transition."""
        dfa = DFAModel(None, {1}, [(None, 'a', 1), (1, 'b', None)])
        self.assertEqual(dfa.run("aba"), Outcome.ACCEPTED)
        self.assertEqual(dfa.run("ab"), Outcome.REJECTED)
        self.assertEqual(dfa.run("b"), Outcome.MALFORMED)
        r = dfa.runtime()
        r.read_sequence("ab")
        self.assertIsNone(r.state)

    def test_hashable(self) -> None:
        dfa = self.sample_dfa()
        self.assertEqual(hash(dfa), hash(self.sample_dfa()))
        self.assertEqual(len({dfa, self.sample_dfa()}), 1)

    def test_hashable_states(self) -> None:
        dfa = DFAModel(('even',), {('even',)}, [
            (('even',), 0, ('even',)), (('even',), 1, ('odd',)),
            (('odd',), 0, ('odd',)), (('odd',), 1, ('even',)),
        ])
        self.assertTrue(dfa.accepts([1, 0, 1]))
        self.assertFalse(dfa.accepts([1, 0, 0]))
        self.assertTrue(dfa.accepts([]))
