"""
Game state machine for the terminal trivia game.
Owns the question batch, progress counters and per-question results.
"""
import logging
import time
from typing import Callable, List, Optional, Tuple

from .models import FALLBACK_QUESTION, GamePhase, GameSettings, TriviaQuestion
from .question_source import QuestionSource, QuestionSourceError


class GameError(Exception):
    """Base exception for game errors."""
    pass


class InvalidPhaseError(GameError):
    """Raised when the game is not in the phase an operation requires."""
    pass


class Game:
    """
    Drives a round of trivia through its phases.

    Transitions are total: an operation that does not apply to the current
    state leaves it unchanged rather than raising. Listeners registered with
    ``add_listener`` are notified after every phase change.
    """

    def __init__(self, question_source: QuestionSource, settings: Optional[GameSettings] = None):
        """
        Initialize the game in the menu phase.

        Args:
            question_source: Source used to fetch each round's batch
            settings: Optional game settings, defaults are used if None
        """
        self.logger = logging.getLogger(__name__)
        self.question_source = question_source
        self.settings = settings or GameSettings()

        self.phase = GamePhase.MENU
        self.questions: List[TriviaQuestion] = []
        self.current_index = 0
        self.total_questions = self.settings.question_count
        self.score = 0
        self.last_answer_correct = False
        self.selected_answer: Optional[int] = None
        self.answer_results: List[bool] = []

        self._listeners: List[Callable[[GamePhase], None]] = []

    def add_listener(self, callback: Callable[[GamePhase], None]) -> None:
        """Register a callback invoked with the new phase after each transition."""
        self._listeners.append(callback)

    def _set_phase(self, phase: GamePhase, reason: str = None) -> None:
        previous = self.phase
        self.phase = phase
        self.logger.debug(
            f"Phase transition: {previous.value} -> {phase.value}" +
            (f" ({reason})" if reason else ""),
            extra={
                'event_type': 'phase_transition',
                'from_phase': previous.value,
                'to_phase': phase.value,
                'reason': reason,
                'timestamp': time.time()
            }
        )
        for callback in self._listeners:
            callback(phase)

    async def start_game(self) -> None:
        """
        Start a new round.

        Clears progress, then fetches a batch of questions. If the fetch
        fails the round proceeds with the single fallback question.
        """
        self.score = 0
        self.current_index = 0
        self.selected_answer = None
        self.last_answer_correct = False
        self.answer_results.clear()
        self._set_phase(GamePhase.LOADING, "round starting")

        try:
            questions = await self.question_source.fetch(self.total_questions)
        except QuestionSourceError as e:
            self.logger.error(
                f"Failed to fetch questions: {e}",
                extra={
                    'event_type': 'fetch_failed',
                    'response_code': e.response_code,
                    'timestamp': time.time()
                }
            )
            questions = []

        if not questions:
            self.logger.warning("Using fallback question for this round")
            questions = [FALLBACK_QUESTION]

        self.questions = list(questions)
        self.logger.info(f"Round started with {len(self.questions)} questions")
        self._set_phase(GamePhase.QUESTION, "batch ready")

    def answer_question(self, answer_index: int) -> None:
        """
        Record an answer to the current question.

        Args:
            answer_index: Index into the current question's ``all_answers()``;
                indices outside that range are ignored
        """
        question = self.current_question()
        if question is None:
            self.logger.debug(f"Ignoring answer {answer_index}: no current question")
            return

        answer_count = len(question.all_answers())
        if not 0 <= answer_index < answer_count:
            self.logger.debug(f"Ignoring answer {answer_index}: question has {answer_count} answers")
            return

        self.last_answer_correct = answer_index == question.correct_index()
        self.selected_answer = answer_index
        if self.last_answer_correct:
            self.score += 1
        self.answer_results.append(self.last_answer_correct)

        self.logger.info(
            f"Question {self.current_index + 1} answered "
            f"{'correctly' if self.last_answer_correct else 'incorrectly'} "
            f"(score {self.score}/{len(self.answer_results)})"
        )
        self._set_phase(GamePhase.SHOW_RESULT, "answer recorded")

    def next_question(self) -> None:
        """Advance past the current question, ending the round after the last one."""
        self.current_index += 1
        self.selected_answer = None

        if self.current_index >= len(self.questions):
            self.logger.info(f"Round complete: {self.score}/{len(self.questions)}")
            self._set_phase(GamePhase.GAME_OVER, "no more questions")
        else:
            self._set_phase(GamePhase.QUESTION, "next question")

    def reset_game(self) -> None:
        """Clear the round and return to the menu."""
        self.questions.clear()
        self.current_index = 0
        self.score = 0
        self.selected_answer = None
        self.answer_results.clear()
        self._set_phase(GamePhase.MENU, "reset")

    def current_question(self) -> Optional[TriviaQuestion]:
        """
        Get the question currently being played.

        Returns:
            Current TriviaQuestion, or None once the batch is exhausted or empty
        """
        if self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    def progress(self) -> Tuple[int, int]:
        """Get (1-based current question number, batch length)."""
        return self.current_index + 1, len(self.questions)

    def percentage(self) -> float:
        """Get the score as a percentage of the batch length."""
        if not self.questions:
            return 0.0
        return self.score / len(self.questions) * 100.0

    def require_phase(self, *phases: GamePhase) -> None:
        """
        Check that the game is in one of the given phases.

        Raises:
            InvalidPhaseError: If the current phase is not among ``phases``
        """
        if self.phase not in phases:
            expected = ", ".join(phase.value for phase in phases)
            raise InvalidPhaseError(
                f"Game is in phase '{self.phase.value}', expected one of: {expected}"
            )
