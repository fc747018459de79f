"""
Maps key presses to game operations according to the current phase.
"""
import logging

from .game import Game, InvalidPhaseError
from .models import GamePhase


ANSWER_KEYS = ("1", "2", "3", "4")
START_KEY = "enter"
QUIT_KEY = "q"


class InputDispatcher:
    """Dispatches key names (as reported by the terminal) to a Game."""

    def __init__(self, game: Game, result_delay: float = 2.0):
        """
        Initialize the dispatcher.

        Args:
            game: Game the keys operate on
            result_delay: Seconds a result stays on screen before auto-advancing
        """
        self.logger = logging.getLogger(__name__)
        self.game = game
        self.result_delay = result_delay

    async def handle_key(self, key: str) -> bool:
        """
        Apply a single key press.

        Args:
            key: Key name, e.g. "1", "enter" or "q"

        Returns:
            False if the key asks to quit, True otherwise
        """
        if key == QUIT_KEY:
            self.logger.info("Quit requested")
            return False

        if key in ANSWER_KEYS:
            if self.game.phase == GamePhase.QUESTION:
                self.game.answer_question(int(key) - 1)
        elif key == START_KEY:
            if self.game.phase == GamePhase.MENU:
                await self.game.start_game()
            elif self.game.phase == GamePhase.GAME_OVER:
                self.game.reset_game()
        else:
            self.logger.debug(f"Ignoring unmapped key {key!r}")

        return True

    @property
    def needs_auto_advance(self) -> bool:
        """Check whether a result is on screen and should advance on its own."""
        return self.game.phase == GamePhase.SHOW_RESULT

    def auto_advance(self) -> None:
        """Move to the next question if a result is still on screen."""
        try:
            self.game.require_phase(GamePhase.SHOW_RESULT)
        except InvalidPhaseError as e:
            self.logger.debug(f"Skipping auto-advance: {e}")
            return
        self.game.next_question()
