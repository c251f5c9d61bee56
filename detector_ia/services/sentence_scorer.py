import re
from typing import Any, List, Mapping, Optional

from detector_ia.models.schemas import HighlightedSegment
from detector_ia.utils.lexicon import default_lexicon
from detector_ia.utils.text_processing import (
    get_sentences,
    is_delimiter,
    split_keeping_delimiters,
    whitespace_word_count,
)

BASE_SCORE = 30


class SentenceScorer:
    """Independent 0-100 AI-likeness score per sentence, used for highlighting."""

    def __init__(self, lexicon: Optional[Mapping[str, Any]] = None):
        self.lexicon = lexicon or default_lexicon()

    def score_sentence(self, sentence: str) -> int:
        lower = sentence.lower()
        score = BASE_SCORE

        score += 20 * sum(1 for phrase in self.lexicon["formulaic_phrases"] if phrase in lower)
        score += 10 * sum(1 for connector in self.lexicon["connectors"] if connector in lower)
        score += 15 * sum(
            1 for structure in self.lexicon["perfect_structures"]
            if re.search(r"\b" + re.escape(structure) + r"\b", lower)
        )

        if 15 <= whitespace_word_count(sentence) <= 25:
            score += 10
        return min(100, score)

    def score(self, text: str) -> List[int]:
        return [self.score_sentence(s) for s in get_sentences(text)]


def highlight_class(score: int) -> str:
    if score >= 70:
        return "highlight-high"
    if score >= 50:
        return "highlight-medium"
    return "highlight-low"


def highlight_sentences(text: str, scores: List[int]) -> List[HighlightedSegment]:
    """
    Re-splits the text keeping delimiters and pairs every sentence segment with
    its score, in order. Delimiters and blank segments pass through unscored.
    """
    segments = []
    index = 0
    for piece in split_keeping_delimiters(text):
        if is_delimiter(piece) or not piece.strip():
            if piece:
                segments.append(HighlightedSegment(text=piece))
            continue
        score = scores[index] if index < len(scores) else 0
        segments.append(HighlightedSegment(text=piece, score=score, css_class=highlight_class(score)))
        index += 1
    return segments
