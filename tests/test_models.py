"""
Unit tests for TriviaQuestion answer ordering.
"""
import dataclasses
import unittest

from trivia.models import FALLBACK_QUESTION, GamePhase, GameSettings, TriviaQuestion


def make_question(correct, incorrect):
    return TriviaQuestion(
        category="General Knowledge",
        type="multiple",
        difficulty="easy",
        question="Pick one",
        correct_answer=correct,
        incorrect_answers=tuple(incorrect),
    )


class TestTriviaQuestion(unittest.TestCase):
    """Test cases for all_answers and correct_index."""

    def test_fallback_question_ordering(self):
        """The fallback question sorts to 2, 3, 4, 5 with 4 at index 2."""
        self.assertEqual(FALLBACK_QUESTION.all_answers(), ["2", "3", "4", "5"])
        self.assertEqual(FALLBACK_QUESTION.correct_index(), 2)

    def test_all_answers_length_and_order(self):
        """All answers include every incorrect answer plus the correct one, sorted."""
        cases = [
            ("b", ["a"]),
            ("Paris", ["London", "Berlin", "Madrid"]),
            ("zeta", ["alpha", "Omega", "beta", "gamma", "delta"]),
        ]
        for correct, incorrect in cases:
            with self.subTest(correct=correct):
                question = make_question(correct, incorrect)
                answers = question.all_answers()
                self.assertEqual(len(answers), len(incorrect) + 1)
                self.assertEqual(answers, sorted(answers))
                self.assertEqual(question.all_answers()[question.correct_index()], correct)

    def test_sort_is_by_code_point(self):
        """Uppercase letters sort before lowercase ones."""
        question = make_question("apple", ["Banana", "cherry"])
        self.assertEqual(question.all_answers(), ["Banana", "apple", "cherry"])
        self.assertEqual(question.correct_index(), 1)

    def test_all_answers_does_not_mutate_question(self):
        """Sorting works on a copy of the incorrect answers."""
        question = make_question("a", ["c", "b"])
        question.all_answers()
        self.assertEqual(question.incorrect_answers, ("c", "b"))

    def test_duplicate_correct_text_resolves_to_first_position(self):
        """Correct text duplicated among the incorrect answers maps to its first slot."""
        question = make_question("b", ["b", "a", "c"])
        self.assertEqual(question.all_answers(), ["a", "b", "b", "c"])
        self.assertEqual(question.correct_index(), 1)

    def test_correct_index_is_always_valid(self):
        """correct_index stays within the answer list."""
        question = make_question("True", ["False"])
        index = question.correct_index()
        self.assertTrue(0 <= index < len(question.all_answers()))

    def test_question_is_immutable(self):
        """Questions are frozen once created."""
        with self.assertRaises(dataclasses.FrozenInstanceError):
            FALLBACK_QUESTION.correct_answer = "5"

    def test_from_dict(self):
        """Questions are built from API result records."""
        question = TriviaQuestion.from_dict({
            "category": "History",
            "type": "multiple",
            "difficulty": "hard",
            "question": "Who?",
            "correct_answer": "Me",
            "incorrect_answers": ["You", "Them", "Us"],
        })
        self.assertEqual(question.category, "History")
        self.assertEqual(question.difficulty, "hard")
        self.assertEqual(question.incorrect_answers, ("You", "Them", "Us"))
        self.assertEqual(question.correct_index(), 0)

    def test_from_dict_missing_required_field(self):
        """Records without a correct answer are rejected."""
        with self.assertRaises(KeyError):
            TriviaQuestion.from_dict({"question": "Who?", "incorrect_answers": ["a"]})


class TestGameSettings(unittest.TestCase):
    """Test cases for default settings and phases."""

    def test_defaults(self):
        settings = GameSettings()
        self.assertEqual(settings.question_count, 10)
        self.assertEqual(settings.result_delay, 2.0)
        self.assertEqual(settings.api_url, "https://opentdb.com/api.php")

    def test_phase_values(self):
        self.assertEqual(
            [phase.value for phase in GamePhase],
            ["menu", "loading", "question", "show_result", "game_over"],
        )


if __name__ == '__main__':
    unittest.main()
