from typing import Any, List, Mapping, Optional

from detector_ia.models.schemas import CitationSuggestions, CitationWarning, MisuseFlag
from detector_ia.utils.text_processing import count_phrase, whitespace_word_count, word_set
from detector_ia.utils.lexicon import default_lexicon


class CitationAdvisor:
    """
    Attribution checks around paraphrasing: quotation/citation/copyright
    warnings, formality and tone, lexical fidelity of a rewrite, and citation
    templates.
    """

    def __init__(self, lexicon: Optional[Mapping[str, Any]] = None):
        self.lexicon = lexicon or default_lexicon()

    def check_for_citations(self, text: str) -> List[CitationWarning]:
        messages = self.lexicon["warning_messages"]
        warnings = []

        if any(q in text for q in self.lexicon["quote_characters"]):
            warnings.append(CitationWarning(type="quotation", message=messages["quotation"], severity="high"))

        # One warning per matching marker
        lower_text = text.lower()
        for marker in self.lexicon["academic_markers"]:
            if marker in lower_text:
                warnings.append(CitationWarning(type="citation", message=messages["citation"], severity="medium"))

        if len(text) > 500 and self.formality(text) > 0.7:
            warnings.append(CitationWarning(type="copyright", message=messages["copyright"], severity="high"))

        return warnings

    def formality(self, text: str) -> float:
        words = whitespace_word_count(text)
        if words == 0:
            return 0.0
        lower_text = text.lower()
        formal_count = sum(
            count_phrase(lower_text, indicator, word_boundary=True)
            for indicator in self.lexicon["formality_indicators"]
        )
        return min(1.0, formal_count / (words * 0.05))

    def fidelity_ratio(self, original: str, paraphrased: str) -> float:
        original_words = word_set(original)
        paraphrased_words = word_set(paraphrased)
        largest = max(len(original_words), len(paraphrased_words))
        if largest == 0:
            return 0.0
        return len(original_words & paraphrased_words) / largest

    def check_fidelity(self, original: str, paraphrased: str) -> str:
        bands = self.lexicon["fidelity_bands"]
        similarity = self.fidelity_ratio(original, paraphrased)
        if similarity > 0.7:
            return bands["high"]
        if similarity > 0.4:
            return bands["good"]
        return bands["low"]

    def analyze_tone(self, text: str) -> str:
        labels = self.lexicon["tone_labels"]
        formality = self.formality(text)
        if formality > 0.6:
            return labels["formal"]
        if formality > 0.3:
            return labels["moderate"]
        return labels["informal"]

    def citation_suggestions(self) -> CitationSuggestions:
        templates = self.lexicon["citation_templates"]
        return CitationSuggestions(
            apa=templates["apa"],
            mla=templates["mla"],
            chicago=templates["chicago"],
            general=templates["general"],
            advice=list(templates["advice"]),
        )

    def detect_misuse(self, text: str, purpose: str = "") -> List[MisuseFlag]:
        messages = self.lexicon["misuse_messages"]
        flags = []

        lower_purpose = (purpose or "").lower()
        if any(term in lower_purpose for term in self.lexicon["assessment_terms"]):
            flags.append(MisuseFlag(type="academic", message=messages["academic"]))

        if len(text) > 1000 and not any(m in text for m in self.lexicon["attribution_markers"]):
            flags.append(MisuseFlag(type="attribution", message=messages["attribution"]))

        return flags
