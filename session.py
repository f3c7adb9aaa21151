from __future__ import annotations

import datetime as dt
import enum
import random
from dataclasses import dataclass
from typing import Sequence

import metrics
from config import DEFAULT_WORD_COUNT, ConfigurationError
from logger import get_logger
from timer import SessionClock
from words import sample_words

logger = get_logger(__name__)


class State(enum.Enum):
    PLAYING = "playing"
    FINISHED = "finished"
    EXITED = "exited"


class KeyAction(enum.Enum):
    CHAR = "char"
    RESET = "reset"
    EXIT = "exit"
    IGNORED = "ignored"


class SessionExitedError(RuntimeError):
    """Raised when an exited session is asked to start a new attempt."""


@dataclass(frozen=True)
class KeyEvent:
    action: KeyAction
    char: str | None = None


def classify_key(key: str, character: str | None) -> KeyEvent:
    if key == "escape":
        return KeyEvent(KeyAction.EXIT)
    if key == "tab":
        return KeyEvent(KeyAction.RESET)
    if character is not None and len(character) == 1 and character.isprintable():
        return KeyEvent(KeyAction.CHAR, character)
    return KeyEvent(KeyAction.IGNORED)


@dataclass(frozen=True)
class Result:
    word_count: int
    char_count: int
    elapsed_ms: int
    wpm: float
    accuracy: float


@dataclass(frozen=True)
class Snapshot:
    state: State
    target: str
    typed: str
    result: Result | None = None

    def marks(self) -> list[metrics.CharMark]:
        return metrics.char_marks(self.target, self.typed)


class TypingSession:
    """One typing exercise: a target line, what has been typed so far, and a clock.

    Input is append-only; there is no way to take back a keystroke. Reaching the
    length of the target stops the clock and moves the session to FINISHED, which
    freezes the reported time, speed and accuracy.
    """

    def __init__(
        self,
        corpus: Sequence[str],
        word_count: int = DEFAULT_WORD_COUNT,
        rng: random.Random | None = None,
        clock: SessionClock | None = None,
    ) -> None:
        if word_count < 1:
            raise ConfigurationError(f"word count must be at least 1, got {word_count}")
        if not corpus:
            raise ConfigurationError("the word corpus is empty")

        self._corpus = corpus
        self._word_count = word_count
        self._rng = rng
        self._clock = clock or SessionClock()
        self._state = State.PLAYING
        self._words: list[str] = []
        self._target = ""
        self._typed: list[str] = []
        self._result: Result | None = None
        self._new_attempt()

    @property
    def state(self) -> State:
        return self._state

    @property
    def target_text(self) -> str:
        return self._target

    @property
    def typed_text(self) -> str:
        return "".join(self._typed)

    @property
    def words(self) -> list[str]:
        return list(self._words)

    def _new_attempt(self) -> None:
        self._words = sample_words(self._corpus, self._word_count, self._rng)
        self._target = " ".join(self._words)
        self._typed = []
        self._result = None
        self._clock.reset()
        logger.debug("New attempt with %d words: %r", len(self._words), self._target)

    def _set_state(self, state: State) -> None:
        if state is not self._state:
            logger.debug("Session state %s -> %s", self._state.name, state.name)
        self._state = state

    def is_complete(self) -> bool:
        return len(self._typed) >= len(self._target)

    def submit_char(self, c: str) -> None:
        if self._state is State.FINISHED:
            # any key dismisses the finish screen
            self._set_state(State.EXITED)
            return
        if self._state is State.EXITED:
            return

        if not self._clock.is_started:
            self._clock.start()
        self._typed.append(c)

        if self.is_complete():
            self._clock.stop()
            self._result = self._build_result()
            self._set_state(State.FINISHED)
            logger.info(
                "Finished %d words in %d ms: %.1f wpm, %.1f%% accuracy",
                self._result.word_count,
                self._result.elapsed_ms,
                self._result.wpm,
                self._result.accuracy,
            )

    def request_exit(self) -> None:
        self._set_state(State.EXITED)

    def reset(self) -> None:
        if self._state is State.EXITED:
            raise SessionExitedError("cannot reset a session that has exited")
        self._new_attempt()
        self._set_state(State.PLAYING)

    def handle(self, event: KeyEvent) -> State:
        if self._state is State.PLAYING:
            if event.action is KeyAction.CHAR and event.char is not None:
                self.submit_char(event.char)
            elif event.action is KeyAction.RESET:
                self.reset()
            elif event.action is KeyAction.EXIT:
                self.request_exit()
        elif self._state is State.FINISHED:
            self.request_exit()
        return self._state

    def _frozen_duration(self) -> dt.timedelta:
        # raises ClockNotStoppedError until the whole text has been typed
        return self._clock.duration()

    def elapsed_ms(self) -> int:
        return self._frozen_duration() // dt.timedelta(milliseconds=1)

    def words_per_minute(self) -> float:
        return metrics.words_per_minute(
            len(self._target), self._frozen_duration().total_seconds()
        )

    def accuracy_percent(self) -> float:
        self._frozen_duration()
        return metrics.accuracy_percent(self._target, self.typed_text)

    def _build_result(self) -> Result:
        return Result(
            word_count=len(self._words),
            char_count=len(self._target),
            elapsed_ms=self.elapsed_ms(),
            wpm=self.words_per_minute(),
            accuracy=self.accuracy_percent(),
        )

    def snapshot(self) -> Snapshot:
        return Snapshot(
            state=self._state,
            target=self._target,
            typed=self.typed_text,
            result=self._result if self._state is State.FINISHED else None,
        )
