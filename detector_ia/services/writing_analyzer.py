import textstat
from spellchecker import SpellChecker
from typing import Dict, Any

from detector_ia.utils.text_processing import get_sentences, tokenize_words

LONG_SENTENCE_WORDS = 30


class WritingAnalyzer:
    def __init__(self):
        textstat.set_lang("es")
        self.spell = SpellChecker(language="es")

    def analyze(self, text: str) -> Dict[str, Any]:
        """
        Readability (Fernández-Huerta), unknown-word count and basic statistics
        for Spanish text. Informational only; never feeds the AI probability.
        """
        if not text.strip():
            return {
                "readability_score": 0,
                "readability_label": "N/A",
                "spelling_errors": 0,
                "word_count": 0,
                "sentence_count": 0,
                "long_sentences": 0,
            }

        # 0-30 muy difícil, 90-100 muy fácil
        score = textstat.fernandez_huerta(text)
        label = self._get_readability_label(score)

        words = tokenize_words(text)
        misspelled = self.spell.unknown(words)

        sentences = get_sentences(text)
        long_sentences = sum(1 for s in sentences if len(s.split()) > LONG_SENTENCE_WORDS)

        return {
            "readability_score": score,
            "readability_label": label,
            "spelling_errors": len(misspelled),
            "word_count": len(words),
            "sentence_count": len(sentences),
            "long_sentences": long_sentences,
        }

    def _get_readability_label(self, score):
        if score > 90: return "Muy fácil"
        if score > 80: return "Fácil"
        if score > 70: return "Algo fácil"
        if score > 60: return "Normal"
        if score > 50: return "Algo difícil"
        if score > 30: return "Difícil"
        return "Muy difícil"
