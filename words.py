from __future__ import annotations

import random
from importlib import resources
from pathlib import Path
from typing import Iterable, Sequence

import requests

from config import DEFAULT_CORPUS_FILE, DEFAULT_CORPUS_PACKAGE, ConfigurationError
from logger import get_logger

logger = get_logger(__name__)


def _parse_word_list(lines: Iterable[str]) -> tuple[str, ...]:
    words = []
    for line in lines:
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.append(word)
    return tuple(dict.fromkeys(words))


def load_corpus(path: Path | None = None) -> tuple[str, ...]:
    """Read a newline-separated word list, the bundled English one by default."""
    if path is None:
        source = resources.files(DEFAULT_CORPUS_PACKAGE).joinpath(DEFAULT_CORPUS_FILE)
    else:
        source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"cannot read word list {source}: {exc}") from exc

    corpus = _parse_word_list(text.splitlines())
    if not corpus:
        raise ConfigurationError(f"word list {source} contains no words")
    logger.debug("Loaded %d words from %s", len(corpus), source)
    return corpus


def fetch_corpus(url: str, timeout: float = 8) -> tuple[str, ...]:
    try:
        response = requests.get(
            url,
            timeout=timeout,
            allow_redirects=True,
            headers={
                "User-Agent": "typing-drill/0.1 (python requests)",
                "Accept": "text/plain",
            },
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise ConfigurationError(f"cannot download word list from {url}: {exc}") from exc

    corpus = _parse_word_list(response.text.splitlines())
    if not corpus:
        raise ConfigurationError(f"word list at {url} contains no words")
    logger.debug("Fetched %d words from %s", len(corpus), url)
    return corpus


def sample_words(
    corpus: Sequence[str], n: int, rng: random.Random | None = None
) -> list[str]:
    """Draw ``n`` distinct corpus entries in random order.

    When ``n`` exceeds the corpus size the whole corpus is returned, shuffled.
    """
    if n < 0:
        raise ValueError(f"cannot sample a negative number of words: {n}")
    draw = rng.sample if rng is not None else random.sample
    if n > len(corpus):
        logger.warning(
            "Requested %d words but the corpus only has %d; using all of them",
            n,
            len(corpus),
        )
        n = len(corpus)
    return draw(corpus, n)
