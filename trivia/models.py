"""
Core data models for the terminal trivia game.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple


DEFAULT_API_URL = "https://opentdb.com/api.php"


class GamePhase(Enum):
    """Enumeration of the phases a game moves through."""
    MENU = "menu"
    LOADING = "loading"
    QUESTION = "question"
    SHOW_RESULT = "show_result"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class TriviaQuestion:
    """A single multiple-choice question as served by the question bank."""
    category: str
    type: str
    difficulty: str
    question: str
    correct_answer: str
    incorrect_answers: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "TriviaQuestion":
        """Build a question from one record of the API ``results`` array."""
        return cls(
            category=data.get("category", ""),
            type=data.get("type", "multiple"),
            difficulty=data.get("difficulty", ""),
            question=data["question"],
            correct_answer=data["correct_answer"],
            incorrect_answers=tuple(data["incorrect_answers"]),
        )

    def all_answers(self) -> List[str]:
        """
        Get every answer in display order.

        Answers are sorted by code point rather than shuffled so the
        position of each answer is stable for a given question.

        Returns:
            Incorrect answers plus the correct answer, sorted ascending
        """
        answers = list(self.incorrect_answers)
        answers.append(self.correct_answer)
        answers.sort()
        return answers

    def correct_index(self) -> int:
        """
        Get the position of the correct answer within ``all_answers()``.

        When the correct text also appears among the incorrect answers the
        first sorted occurrence wins.

        Returns:
            Index of the correct answer, or 0 if it cannot be found
        """
        try:
            return self.all_answers().index(self.correct_answer)
        except ValueError:
            return 0


FALLBACK_QUESTION = TriviaQuestion(
    category="General Knowledge",
    type="multiple",
    difficulty="easy",
    question="What is 2 + 2?",
    correct_answer="4",
    incorrect_answers=("2", "3", "5"),
)


@dataclass
class GameSettings:
    """Configuration settings for a game."""
    question_count: int = 10
    result_delay: float = 2.0
    api_url: str = DEFAULT_API_URL
