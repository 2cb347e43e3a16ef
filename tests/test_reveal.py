import unittest

from game import (
    ANSWERED_STYLE,
    PLACEHOLDER,
    Clue,
    RevealState,
    coerce_reveal,
    next_reveal,
    style_hint,
)


class TestRevealMachine(unittest.TestCase):
    def setUp(self):
        self.clue = Clue(question="Hamlet author", answer="Shakespeare")

    def test_given_new_clue_when_created_then_hidden_with_placeholder(self):
        self.assertIs(self.clue.reveal, RevealState.HIDDEN)
        self.assertEqual(self.clue.display(), PLACEHOLDER)

    def test_given_hidden_when_next_then_question_text(self):
        self.assertEqual(next_reveal(RevealState.HIDDEN, self.clue), (RevealState.QUESTION, "Hamlet author"))

    def test_given_question_when_next_then_answer_text(self):
        self.assertEqual(next_reveal(RevealState.QUESTION, self.clue), (RevealState.ANSWER, "Shakespeare"))

    def test_given_answer_when_next_repeatedly_then_stays_answer(self):
        for _ in range(10):
            self.assertEqual(next_reveal(RevealState.ANSWER, self.clue), (RevealState.ANSWER, "Shakespeare"))

    def test_given_repeated_application_then_never_regresses(self):
        order = [RevealState.HIDDEN, RevealState.QUESTION, RevealState.ANSWER]
        state = RevealState.HIDDEN
        seen = [state]
        for _ in range(5):
            state, _text = next_reveal(state, self.clue)
            seen.append(state)
        self.assertEqual(seen[:4], [RevealState.HIDDEN, RevealState.QUESTION, RevealState.ANSWER, RevealState.ANSWER])
        ranks = [order.index(s) for s in seen]
        self.assertEqual(ranks, sorted(ranks))

    def test_given_next_reveal_then_clue_not_mutated(self):
        next_reveal(RevealState.HIDDEN, self.clue)
        self.assertIs(self.clue.reveal, RevealState.HIDDEN)

    def test_given_legacy_tags_when_coerced_then_mapped(self):
        self.assertIs(coerce_reveal(None), RevealState.HIDDEN)
        self.assertIs(coerce_reveal("question"), RevealState.QUESTION)
        self.assertIs(coerce_reveal("ANSWER"), RevealState.ANSWER)
        self.assertIs(coerce_reveal(RevealState.ANSWER), RevealState.ANSWER)

    def test_given_unknown_value_when_coerced_then_fails_closed_to_hidden(self):
        for junk in ("shown", "", 3, object(), ["answer"]):
            self.assertIs(coerce_reveal(junk), RevealState.HIDDEN)
        self.assertEqual(next_reveal("bogus", self.clue), (RevealState.QUESTION, "Hamlet author"))

    def test_given_transitions_then_only_question_to_answer_is_styled(self):
        self.assertEqual(style_hint(RevealState.QUESTION, RevealState.ANSWER), ANSWERED_STYLE)
        self.assertIsNone(style_hint(RevealState.HIDDEN, RevealState.QUESTION))
        self.assertIsNone(style_hint(RevealState.ANSWER, RevealState.ANSWER))


if __name__ == "__main__":
    unittest.main(verbosity=2)
