"""
Textual application hosting the trivia game loop.

Textual owns the terminal: raw mode and the alternate screen are entered
when the app starts and restored on every exit path.
"""
import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from .game import Game
from .input_dispatcher import InputDispatcher
from .models import GamePhase
from .question_source import QuestionSource
from .ui import render


logger = logging.getLogger(__name__)


class TriviaApp(App):
    """Full-screen terminal front end for a single Game."""

    TITLE = "Terminal Trivia"
    CSS = """
    #screen {
        height: 1fr;
    }
    """

    def __init__(self, game: Game, dispatcher: InputDispatcher, question_source: Optional[QuestionSource] = None):
        super().__init__()
        self.game = game
        self.dispatcher = dispatcher
        self.question_source = question_source

    def compose(self) -> ComposeResult:
        yield Static(render(self.game), id="screen")

    def on_mount(self) -> None:
        self.game.add_listener(self._on_phase_change)
        logger.info("Trivia app started")

    async def on_unmount(self) -> None:
        await self._close_source()
        logger.info("Trivia app stopped")

    async def _close_source(self) -> None:
        if self.question_source is not None:
            await self.question_source.close()

    def refresh_view(self) -> None:
        self.query_one("#screen", Static).update(render(self.game))

    def _on_phase_change(self, phase: GamePhase) -> None:
        self.refresh_view()
        if self.dispatcher.needs_auto_advance:
            self.set_timer(self.dispatcher.result_delay, self.dispatcher.auto_advance)

    async def on_key(self, event: events.Key) -> None:
        keep_running = await self.dispatcher.handle_key(event.key)
        if not keep_running:
            await self._close_source()
            self.exit()
