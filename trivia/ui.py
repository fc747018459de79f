"""
Presentation layer for the terminal trivia game.

Every function here is a pure function of a ``Game`` snapshot and returns
rich renderables; nothing in this module mutates game state.
"""
from typing import List

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .game import Game
from .models import GamePhase


TITLE = "🧠 Terminal Trivia 🧠"

HTML_ENTITIES = (
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&apos;", "'"),
)

PERFORMANCE_TIERS = (
    (90.0, "🏆 Excellent! You're a trivia master!"),
    (80.0, "🌟 Great job! Very impressive!"),
    (70.0, "👍 Good work! Keep it up!"),
    (60.0, "😊 Not bad! Room for improvement!"),
)
LOWEST_TIER_MESSAGE = "😅 Better luck next time!"

FOOTER_HINTS = {
    GamePhase.MENU: "Press ENTER to start • Press 'q' to quit",
    GamePhase.QUESTION: "Press 1-4 to select answer • Press 'q' to quit",
    GamePhase.GAME_OVER: "Press ENTER to play again • Press 'q' to quit",
}
DEFAULT_FOOTER_HINT = "Press 'q' to quit"

CORRECT_MARK = ("✓", "green")
INCORRECT_MARK = ("✗", "red")
CURRENT_MARK = ("●", "yellow")
PENDING_MARK = ("○", "grey50")


def decode_html(text: str) -> str:
    """
    Unescape the small set of HTML entities the question bank emits.

    Unrecognized entities are left as they are.
    """
    for entity, replacement in HTML_ENTITIES:
        text = text.replace(entity, replacement)
    return text


def performance_message(percentage: float) -> str:
    """Get the game-over message for a score percentage (thresholds inclusive)."""
    for threshold, message in PERFORMANCE_TIERS:
        if percentage >= threshold:
            return message
    return LOWEST_TIER_MESSAGE


def progress_marks(game: Game) -> List[tuple]:
    """
    Build the per-question progress strip.

    Args:
        game: Game to summarize

    Returns:
        List of (symbol, style) pairs, one per question in the batch
    """
    marks = [CORRECT_MARK if correct else INCORRECT_MARK for correct in game.answer_results]
    total = len(game.questions)

    # the current question is only unanswered while no result is showing
    if game.current_index < total and len(marks) == game.current_index:
        marks.append(CURRENT_MARK)
    marks.extend(PENDING_MARK for _ in range(len(marks), total))

    return marks


def render_progress(game: Game) -> Panel:
    strip = Text(justify="center")
    for i, (symbol, style) in enumerate(progress_marks(game)):
        if i > 0:
            strip.append(" ")
        strip.append(symbol, style=style)

    current, total = game.progress()
    answered = max(len(game.answer_results), 1)
    score_info = Text(
        f"Question {current}/{total} | Score: {game.score}/{answered}",
        justify="center",
    )
    return Panel(Group(strip, score_info), title="Progress")


def render_menu(game: Game) -> Panel:
    text = Text(
        "\nWelcome to Terminal Trivia!\n\n"
        "Test your knowledge with questions from Open Trivia DB\n\n"
        "Press ENTER to start playing",
        justify="center",
    )
    return Panel(text, title="Menu")


def render_loading(game: Game) -> Panel:
    text = Text(
        "\nLoading questions...\n\n"
        "Please wait while we fetch trivia questions",
        justify="center",
    )
    return Panel(text, title="Loading")


def render_question(game: Game) -> RenderableType:
    question = game.current_question()
    if question is None:
        return Text("")

    question_panel = Panel(
        Text(decode_html(question.question)),
        title=Text(f"{question.category} | {question.difficulty}"),
    )

    answers = Text()
    for i, answer in enumerate(question.all_answers()):
        if i > 0:
            answers.append("\n")
        answers.append(f"{i + 1}. {decode_html(answer)}", style="white")
    answers_panel = Panel(answers, title="Answers")

    return Group(render_progress(game), question_panel, answers_panel)


def render_result(game: Game) -> RenderableType:
    question = game.current_question()
    if question is None:
        return Text("")

    if game.last_answer_correct:
        banner = Text("✅ Correct!", style="bold green", justify="center")
    else:
        banner = Text("❌ Incorrect!", style="bold red", justify="center")

    correct_text = Text(
        f"The correct answer was: {decode_html(question.correct_answer)}",
        justify="center",
    )

    return Group(
        render_progress(game),
        Panel(banner, title="Result"),
        Panel(correct_text, title="Correct Answer"),
    )


def render_game_over(game: Game) -> Panel:
    percentage = game.percentage()
    text = Text(
        "\n🎉 Game Over! 🎉\n\n"
        f"Final Score: {game.score}/{len(game.questions)}\n"
        f"Percentage: {percentage:.1f}%\n\n"
        f"{performance_message(percentage)}\n\n"
        "Press ENTER to play again",
        justify="center",
    )
    return Panel(text, title="Game Over")


PHASE_RENDERERS = {
    GamePhase.MENU: render_menu,
    GamePhase.LOADING: render_loading,
    GamePhase.QUESTION: render_question,
    GamePhase.SHOW_RESULT: render_result,
    GamePhase.GAME_OVER: render_game_over,
}


def render(game: Game) -> RenderableType:
    """
    Render the whole screen for the current phase.

    Args:
        game: Game snapshot to draw

    Returns:
        Header, phase body and footer as a single renderable
    """
    header = Panel(Text(TITLE, style="bold cyan", justify="center"))
    body = PHASE_RENDERERS[game.phase](game)
    footer = Panel(
        Text(FOOTER_HINTS.get(game.phase, DEFAULT_FOOTER_HINT), style="grey70", justify="center")
    )
    return Group(header, body, footer)
