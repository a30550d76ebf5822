"""Text statistics for the live counter.

Everything here is a pure function of the buffer and the analysis
configuration.  The controller calls :func:`recompute` after every
mutation and replaces its previous :class:`DerivedStats` wholesale.
"""

import logging
import math
import re
from collections import Counter
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PER_MINUTE = 225

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_NON_LETTER_RE = re.compile(r"[^a-z]")
_CENT = Decimal("0.01")


@dataclass(frozen=True)
class AnalysisConfig:
    """Inputs that change how the buffer is measured.

    ``char_limit`` is None whenever the limit feature is switched off.
    """

    exclude_spaces: bool = False
    char_limit: int | None = None


@dataclass(frozen=True)
class LetterStat:
    letter: str
    count: int
    percentage: str   # e.g. "12.50%"


@dataclass(frozen=True)
class DerivedStats:
    char_count: int = 0
    word_count: int = 0
    sentence_count: int = 0
    reading_time: str = "0 seconds"
    letter_frequencies: tuple[LetterStat, ...] = field(default_factory=tuple)
    exceeds_limit: bool = False


# ---------------------------------------------------------------------------
# Individual measures
# ---------------------------------------------------------------------------

def count_characters(text: str, exclude_spaces: bool = False) -> int:
    if exclude_spaces:
        return len(_WHITESPACE_RE.sub("", text))
    return len(text)


def count_words(text: str) -> int:
    """Number of whitespace-separated runs, 0 for blank text."""
    trimmed = text.strip()
    if not trimmed:
        return 0
    return len(_WHITESPACE_RE.split(trimmed))


def count_sentences(text: str) -> int:
    """Non-blank segments between runs of ``.``, ``!`` or ``?``.

    Text without any terminator still counts as one sentence.
    """
    if not text.strip():
        return 0
    return sum(1 for seg in _SENTENCE_SPLIT_RE.split(text) if seg.strip())


def format_reading_time(word_count: int, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> str:
    minutes = word_count / words_per_minute
    if minutes < 1:
        return f"{math.ceil(minutes * 60)} seconds"
    rounded = math.ceil(minutes)
    return f"{rounded} minute{'s' if rounded != 1 else ''}"


def _format_percentage(count: int, total: int) -> str:
    # Half-up on the exact binary value, like fixed-point formatting in a browser.
    value = Decimal(count / total * 100).quantize(_CENT, rounding=ROUND_HALF_UP)
    return f"{value}%"


def letter_frequencies(text: str) -> tuple[LetterStat, ...]:
    """Tally a–z letters, most frequent first.

    Ties keep the order in which letters were first seen.  Anything
    outside a–z (after lowercasing) is ignored.
    """
    letters = _NON_LETTER_RE.sub("", text.lower())
    total = len(letters)
    if total == 0:
        return ()

    tally = Counter(letters)
    ranked = sorted(tally.items(), key=lambda item: item[1], reverse=True)
    return tuple(
        LetterStat(letter=letter, count=count, percentage=_format_percentage(count, total))
        for letter, count in ranked
    )


# ---------------------------------------------------------------------------
# Full recomputation
# ---------------------------------------------------------------------------

def recompute(
    text: str,
    config: AnalysisConfig,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
) -> DerivedStats:
    """Derive every statistic for *text* under *config*.

    Deterministic and side-effect free; cost is linear in ``len(text)``.
    """
    char_count = count_characters(text, config.exclude_spaces)
    word_count = count_words(text)
    exceeds = config.char_limit is not None and char_count > config.char_limit

    return DerivedStats(
        char_count=char_count,
        word_count=word_count,
        sentence_count=count_sentences(text),
        reading_time=format_reading_time(word_count, words_per_minute),
        letter_frequencies=letter_frequencies(text),
        exceeds_limit=exceeds,
    )
