import logging
import random
import re
from typing import Any, Callable, List, Mapping, Optional

from detector_ia.models.schemas import ParaphraseAlternative, ParaphraseLevel, ParaphraseMetadata, ParaphraseResult
from detector_ia.services.citation_advisor import CitationAdvisor
from detector_ia.services.oracles import OracleError, ParaphraseOracle
from detector_ia.utils.lexicon import default_lexicon
from detector_ia.utils.text_processing import get_sentences

logger = logging.getLogger(__name__)

MIN_PARAPHRASE_CHARS = 10
ALTERNATIVES = 3
MERGE_THRESHOLD = 0.6

ProgressCallback = Callable[[str, int], None]


class ParaphraseInputError(ValueError):
    pass


class ParaphraseEngine:
    """
    Produces three rewrites of a passage at a chosen intensity.

    All randomness comes from the injected ``rng`` so a seeded generator makes
    the alternatives reproducible.
    """

    def __init__(
        self,
        oracle: Optional[ParaphraseOracle] = None,
        rng: Optional[random.Random] = None,
        lexicon: Optional[Mapping[str, Any]] = None,
        advisor: Optional[CitationAdvisor] = None,
    ):
        self.oracle = oracle
        self.rng = rng or random.Random()
        self.lexicon = lexicon or default_lexicon()
        self.advisor = advisor or CitationAdvisor(self.lexicon)

        synonyms = self.lexicon["synonyms"]
        # Longest keys first so 'sin embargo' wins over any single-word key inside it
        keys = sorted(synonyms, key=len, reverse=True)
        self._synonym_pattern = re.compile(
            r"\b(" + "|".join(re.escape(k) for k in keys) + r")\b", re.IGNORECASE
        )
        openers = "|".join(re.escape(o) for o in self.lexicon["transition_openers"])
        self._opener_pattern = re.compile(r"^(" + openers + r")")

    def paraphrase(
        self,
        text: str,
        level: ParaphraseLevel = ParaphraseLevel.moderate,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ParaphraseResult:
        if not text or len(text.strip()) < MIN_PARAPHRASE_CHARS:
            raise ParaphraseInputError("El texto debe tener al menos 10 caracteres")
        level = ParaphraseLevel(level)

        def report(message: str, percent: int):
            if on_progress:
                on_progress(message, percent)

        warnings = self.advisor.check_for_citations(text)
        report("Analizando texto original...", 10)

        alternatives = []
        for variant in range(ALTERNATIVES):
            report(f"Generando alternativa {variant + 1}...", 20 + variant * 25)
            alternatives.append(self.generate_alternative(text, level, variant))

        report("Generando recomendaciones...", 95)

        first = alternatives[0].text
        return ParaphraseResult(
            original=text,
            alternatives=alternatives,
            level=self.lexicon["strategies"][level.value]["name"],
            warnings=warnings,
            citation_suggestions=self.advisor.citation_suggestions(),
            metadata=ParaphraseMetadata(
                fidelity_check=self.advisor.check_fidelity(text, first),
                fidelity_ratio=self.advisor.fidelity_ratio(text, first),
                tone=self.advisor.analyze_tone(text),
                rewrite_level=level,
            ),
        )

    def generate_alternative(self, text: str, level: ParaphraseLevel, variant: int) -> ParaphraseAlternative:
        level = ParaphraseLevel(level)
        explanation = self.explanation(level, variant)

        if self.oracle is not None:
            generated = self.oracle_paraphrase(text, level, variant)
            if generated is not None:
                return ParaphraseAlternative(text=generated, explanation=explanation, level=level, source="oracle")

        return ParaphraseAlternative(
            text=self.rule_based_paraphrase(text, level, variant),
            explanation=explanation,
            level=level,
            source="rules",
        )

    def oracle_paraphrase(self, text: str, level: ParaphraseLevel, variant: int) -> Optional[str]:
        """None means the caller should fall back to the rule-based rewrite."""
        prompt = self.lexicon["prompts"][level.value].format(text=text)
        try:
            generated = self.oracle.generate(prompt, level.value, variant)
        except OracleError as e:
            logger.warning(f"AI paraphrasing failed, using rule-based fallback: {e}")
            return None

        generated = (generated or "").replace(prompt, "").strip()
        if len(generated) < MIN_PARAPHRASE_CHARS:
            logger.info("AI paraphrase empty or too short, using rule-based fallback")
            return None
        return generated

    def rule_based_paraphrase(self, text: str, level: ParaphraseLevel, variant: int) -> str:
        level = ParaphraseLevel(level)
        strategy = self.lexicon["strategies"][level.value]
        sentences = get_sentences(text)
        paraphrased: List[str] = []

        for index, sentence in enumerate(sentences):
            rewritten = sentence
            if strategy["synonym_intensity"] > 0:
                rewritten = self.replace_synonyms(rewritten, strategy["synonym_intensity"], variant)

            if not strategy["preserve_structure"] and level != ParaphraseLevel.light:
                rewritten = self.restructure_sentence(rewritten, variant)

            if level == ParaphraseLevel.heavy and index > 0 and paraphrased:
                if self.rng.random() > MERGE_THRESHOLD:
                    rewritten = self.combine_sentences(paraphrased.pop(), rewritten)

            paraphrased.append(rewritten)

        return self.add_variation(" ".join(paraphrased), variant)

    def replace_synonyms(self, sentence: str, intensity: float, variant: int) -> str:
        synonyms = self.lexicon["synonyms"]

        def substitute(match):
            word = match.group(0)
            if self.rng.random() >= intensity:
                return word
            options = synonyms[word.lower()]
            replacement = options[(variant + self.rng.randrange(len(options))) % len(options)]
            if word[0].isupper():
                return replacement[0].upper() + replacement[1:]
            return replacement

        return self._synonym_pattern.sub(substitute, sentence)

    def restructure_sentence(self, sentence: str, variant: int) -> str:
        strategy = variant % 3

        if strategy == 0:
            # Swap the two clauses around a single comma
            parts = sentence.split(",")
            if len(parts) == 2:
                return parts[1].strip() + ", " + parts[0].strip().lower()
            return sentence

        if strategy == 2:
            transitions = self.lexicon["transitions"]
            if not self._opener_pattern.match(sentence):
                return transitions[variant % len(transitions)] + " " + sentence.lower()
            return sentence

        return sentence

    def combine_sentences(self, first: str, second: str) -> str:
        connector = self.rng.choice(self.lexicon["combine_connectors"])
        first = re.sub(r"\.$", "", first)
        second = second[:1].lower() + second[1:]
        return f"{first}; {connector}, {second}"

    def add_variation(self, text: str, variant: int) -> str:
        if variant == 1:
            return re.sub(r"es importante", "resulta fundamental", text, flags=re.IGNORECASE)
        if variant == 2:
            return re.sub(r"resulta fundamental", "es importante", text, flags=re.IGNORECASE)
        return text

    def explanation(self, level: ParaphraseLevel, variant: int) -> str:
        return self.lexicon["explanations"][ParaphraseLevel(level).value][variant % 3]
