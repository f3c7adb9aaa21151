from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence


DEFAULT_WORD_COUNT = 24
WORDS_ENV_VAR = "TYPING_DRILL_WORDS"
DEFAULT_CORPUS_PACKAGE = "wordlists"
DEFAULT_CORPUS_FILE = "english.txt"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigurationError(ValueError):
    """Raised at startup when the session cannot be built from the given settings."""


@dataclass
class Settings:
    word_count: int = DEFAULT_WORD_COUNT
    corpus_path: Path | None = None
    corpus_url: str | None = None
    seed: int | None = None
    log_level: str = "WARNING"
    log_file: Path | None = None

    def validate(self) -> "Settings":
        if self.word_count < 1:
            raise ConfigurationError(
                f"word count must be at least 1, got {self.word_count}"
            )
        if self.corpus_path is not None and self.corpus_url is not None:
            raise ConfigurationError("use either --corpus or --corpus-url, not both")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(f"unknown log level: {self.log_level}")
        return self


def default_word_count() -> int:
    raw = os.environ.get(WORDS_ENV_VAR)
    if not raw:
        return DEFAULT_WORD_COUNT
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"{WORDS_ENV_VAR} must be an integer, got {raw!r}"
        ) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typing-drill",
        description="Type a line of random words and see how fast you are.",
    )
    parser.add_argument(
        "-w",
        "--words",
        type=int,
        default=None,
        help=f"Number of words to type (default: {DEFAULT_WORD_COUNT}, "
        f"or ${WORDS_ENV_VAR})",
    )
    parser.add_argument(
        "--corpus",
        type=Path,
        help="Path to a newline-separated word list",
    )
    parser.add_argument(
        "--corpus-url",
        type=str,
        help="URL of a newline-separated word list to download",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for the word sampler, for reproducible runs",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to this file (the terminal itself is used by the UI)",
    )
    return parser


def settings_from_args(argv: Sequence[str] | None = None) -> Settings:
    args = build_parser().parse_args(argv)
    word_count = args.words if args.words is not None else default_word_count()
    settings = Settings(
        word_count=word_count,
        corpus_path=args.corpus,
        corpus_url=args.corpus_url,
        seed=args.seed,
        log_level=args.log_level,
        log_file=args.log_file,
    )
    return settings.validate()
