from __future__ import annotations

import random
import sys
from typing import Sequence

from rich.markup import escape
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Container, Vertical
from textual.screen import Screen
from textual.widgets import Static

from config import ConfigurationError, Settings, settings_from_args
from logger import configure_logging, get_logger
from metrics import CharMark
from session import Result, Snapshot, State, TypingSession, classify_key
from words import fetch_corpus, load_corpus

logger = get_logger(__name__)

MARK_STYLES = {
    CharMark.CORRECT: "white",
    CharMark.INCORRECT: "red",
    CharMark.PENDING: "dim",
}


def render_target(snapshot: Snapshot) -> str:
    rendered = []
    for ch, mark in zip(snapshot.target, snapshot.marks()):
        rendered.append(f"[{MARK_STYLES[mark]}]{escape(ch)}[/]")
    return "".join(rendered)


def render_result(result: Result) -> str:
    return (
        "You did it!\n\n"
        f"Time: {result.elapsed_ms / 1000.0:.1f}s\n"
        f"WPM: {result.wpm:.1f}\n"
        f"Accuracy: {result.accuracy:.1f}%"
    )


class TypingScreen(Screen):
    def __init__(self, session: TypingSession) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        with Vertical(id="typing"):
            yield Static("", id="target")
            yield Static("tab: new words · esc: quit", id="hint")

    def on_mount(self) -> None:
        self._update_target()

    def on_key(self, event: events.Key) -> None:
        event.prevent_default()
        event.stop()
        state = self.session.handle(classify_key(event.key, event.character))

        if state is State.EXITED:
            self.app.exit()
            return

        self._update_target()
        if state is State.FINISHED:
            result = self.session.snapshot().result
            if result is not None:
                self.app.push_screen(SummaryScreen(self.session, result))

    def _update_target(self) -> None:
        snapshot = self.session.snapshot()
        self.query_one("#target", Static).update(render_target(snapshot))


class SummaryScreen(Screen):
    def __init__(self, session: TypingSession, result: Result) -> None:
        super().__init__()
        self.session = session
        self.result = result

    def compose(self) -> ComposeResult:
        with Container(id="summary"):
            yield Static(render_result(self.result), id="summary-body")

    def on_mount(self) -> None:
        self.query_one("#summary", Container).border_title = (
            f"{self.result.word_count} words"
        )

    def on_key(self, event: events.Key) -> None:
        event.prevent_default()
        event.stop()
        # any key dismisses the summary and ends the program
        if self.session.handle(classify_key(event.key, event.character)) is State.EXITED:
            self.app.exit()


class TypingDrillApp(App):
    CSS = """
    #typing {
        align: center middle;
        padding: 1 2;
    }

    #target {
        width: 80%;
        height: auto;
    }

    #hint {
        width: 80%;
        color: $text-muted;
        margin-top: 1;
    }

    SummaryScreen {
        align: center middle;
    }

    #summary {
        width: 40;
        height: auto;
        border: round yellow;
        border-title-color: yellow;
        padding: 2;
    }
    """

    TITLE = "Typing Drill"
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: TypingSession) -> None:
        super().__init__()
        self.session = session

    def on_mount(self) -> None:
        self.push_screen(TypingScreen(self.session))


def build_session(settings: Settings) -> TypingSession:
    if settings.corpus_url:
        corpus = fetch_corpus(settings.corpus_url)
    else:
        corpus = load_corpus(settings.corpus_path)
    rng = random.Random(settings.seed) if settings.seed is not None else None
    return TypingSession(corpus, word_count=settings.word_count, rng=rng)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = settings_from_args(argv)
        configure_logging(settings.log_level, settings.log_file)
        session = build_session(settings)
    except ConfigurationError as exc:
        logger.debug("Configuration error: %s", exc)
        print(f"typing-drill: {exc}", file=sys.stderr)
        return 2

    logger.info("Starting a %d word session", settings.word_count)
    app = TypingDrillApp(session)
    app.run()
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
