import re
from typing import List, Tuple

import numpy as np

SENTENCE_DELIMITERS = re.compile(r"[.!?]+")
SENTENCE_DELIMITERS_CAPTURING = re.compile(r"([.!?]+)")
WORD_PATTERN = re.compile(r"\b[a-záéíóúñü]+\b")
ALNUM_WORD_PATTERN = re.compile(r"\b\w+\b")


def get_sentences(text: str) -> List[str]:
    """
    Splits text on runs of '.', '!' and '?'. Pieces are trimmed and empty ones
    dropped; the terminal punctuation is not kept.
    """
    return [s.strip() for s in SENTENCE_DELIMITERS.split(text) if s.strip()]


def split_keeping_delimiters(text: str) -> List[str]:
    """
    Same split as get_sentences but keeps the delimiter runs as their own
    items so the original text can be rebuilt for highlighting.
    """
    return SENTENCE_DELIMITERS_CAPTURING.split(text)


def is_delimiter(segment: str) -> bool:
    return bool(SENTENCE_DELIMITERS.fullmatch(segment))


def tokenize_words(text: str) -> List[str]:
    """Lower-cased Spanish letter tokens."""
    return WORD_PATTERN.findall(text.lower())


def word_set(text: str) -> set:
    return set(ALNUM_WORD_PATTERN.findall(text.lower()))


def whitespace_word_count(text: str) -> int:
    return len(text.split())


def sentence_lengths(sentences: List[str]) -> List[int]:
    return [whitespace_word_count(s) for s in sentences]


def count_phrase(text: str, phrase: str, word_boundary: bool = False) -> int:
    """
    Counts non-overlapping occurrences of phrase in text. Without word_boundary
    the match is a plain substring scan, so 'a fin de' also matches inside
    'para fin de'.
    """
    pattern = re.escape(phrase)
    if word_boundary:
        pattern = r"\b" + pattern + r"\b"
    return len(re.findall(pattern, text))


def contains_whole_word(text: str, phrase: str) -> bool:
    return re.search(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)", text) is not None


def length_stats(lengths: List[int]) -> Tuple[float, float]:
    """Mean and population standard deviation."""
    values = np.asarray(lengths, dtype=np.float64)
    return float(values.mean()), float(values.std())
