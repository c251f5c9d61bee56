from typing import Any, Dict, List, Mapping, Optional

from detector_ia.utils.lexicon import default_lexicon
from detector_ia.utils.text_processing import (
    contains_whole_word,
    count_phrase,
    get_sentences,
    length_stats,
    sentence_lengths,
    tokenize_words,
    whitespace_word_count,
)


def _clamp(score: float) -> float:
    return max(0.0, min(100.0, score))


class FeatureExtractor:
    """
    Computes the stylometric metrics used by the probability model.
    Every metric is a score in [0, 100] where higher means more AI-like.
    """

    def __init__(self, lexicon: Optional[Mapping[str, Any]] = None):
        self.lexicon = lexicon or default_lexicon()

    def extract(self, text: str, include_burstiness: bool = False) -> Dict[str, float]:
        sentences = get_sentences(text)
        metrics = {
            "uniformity": self.uniformity(sentences),
            "complexity": self.lexical_complexity(text),
            "sentence_variation": self.sentence_variation(sentences),
            "patterns": self.repetitive_patterns(text, sentences),
            "naturalness": self.naturalness(text, sentences),
            "connectors": self.connectors(text, sentences),
            "manipulation": self.manipulation(text, sentences),
        }
        if include_burstiness:
            metrics["burstiness"] = self.burstiness(sentences)
        return metrics

    def uniformity(self, sentences: List[str]) -> float:
        """AI prose keeps sentence lengths tight, typically 20-28 words."""
        if len(sentences) < 2:
            return 0.0
        mean, std_dev = length_stats(sentence_lengths(sentences))

        score = max(0.0, 100 - std_dev * 4)
        if 20 <= mean <= 28:
            score = min(100.0, score + 15)
        if std_dev < 5:
            score = min(100.0, score + 20)
        return _clamp(score)

    def lexical_complexity(self, text: str) -> float:
        words = tokenize_words(text)
        if not words:
            return 0.0
        diversity = len(set(words)) / len(words) * 100

        if diversity > 70 or diversity < 30:
            return _clamp(100 - abs(50 - diversity))
        return _clamp(60 + (diversity - 50))

    def sentence_variation(self, sentences: List[str]) -> float:
        if len(sentences) < 3:
            return 50.0
        lengths = sentence_lengths(sentences)
        score = sum(20 for a, b in zip(lengths, lengths[1:]) if abs(a - b) < 3)
        return _clamp(score)

    def repetitive_patterns(self, text: str, sentences: List[str]) -> float:
        lower_text = text.lower()
        score = 0

        # Phrase stuffing: the same stock phrase planted in most sentences
        for phrase in self.lexicon["stuffing_phrases"]:
            count = count_phrase(lower_text, phrase)
            if count > len(sentences) * 0.5:
                score += 50
            elif count >= 3:
                score += count * 25

        for phrase in self.lexicon["formulaic_phrases"]:
            count = count_phrase(lower_text, phrase)
            if count == 1:
                score += 20
            elif count >= 2:
                score += count * 30

        for structure in self.lexicon["perfect_structures"]:
            score += count_phrase(lower_text, structure, word_boundary=True) * 15

        return _clamp(score)

    def naturalness(self, text: str, sentences: List[str]) -> float:
        lower_text = text.lower()
        score = 0

        if not any(contains_whole_word(lower_text, w) for w in self.lexicon["colloquialisms"]):
            score += 35

        for marker in self.lexicon["formal_markers"]:
            if marker in lower_text:
                score += 12

        if sentences:
            emotional = text.count("!") + text.count("?")
            if emotional / len(sentences) < 0.1:
                score += 25

        paragraphs = [p for p in text.split("\n") if p.strip()]
        if len(paragraphs) >= 3:
            mean, _ = length_stats([whitespace_word_count(p) for p in paragraphs])
            if 40 < mean < 80:
                score += 15

        return _clamp(score)

    def connectors(self, text: str, sentences: List[str]) -> float:
        if not sentences:
            return 30.0
        lower_text = text.lower()
        count = sum(count_phrase(lower_text, c, word_boundary=True) for c in self.lexicon["connectors"])
        density = count / len(sentences)

        if 0.3 < density < 0.7:
            return 70.0
        if density >= 0.7:
            return 85.0
        return 30.0

    def burstiness(self, sentences: List[str]) -> float:
        """Inverted coefficient of variation: flat sentence lengths score high."""
        if len(sentences) < 3:
            return 50.0
        mean, std_dev = length_stats(sentence_lengths(sentences))
        raw = min(100.0, (std_dev / mean) * 150)
        return _clamp(100 - raw)

    def manipulation(self, text: str, sentences: List[str]) -> float:
        """Signals of text massaged to evade detection."""
        if not sentences:
            return 0.0
        score = 0

        lowercase_starts = 0
        for sentence in sentences:
            # Opening marks such as '¿' have no case and count as lowercase
            if sentence[0] == sentence[0].lower():
                lowercase_starts += 1
        if lowercase_starts / len(sentences) > 0.5:
            score += 60

        # Run-on text with almost no sentence punctuation
        if len(text) / len(sentences) > 200:
            score += 40

        paragraphs = [p for p in text.split("\n\n") if p.strip()]
        if len(paragraphs) == 1 and whitespace_word_count(text) > 100:
            score += 30

        return _clamp(score)
