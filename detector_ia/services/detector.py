import logging
import time
from typing import Any, Callable, Mapping, Optional

from detector_ia.config import DetectorConfig
from detector_ia.models.schemas import ProbabilityResult
from detector_ia.services.features import FeatureExtractor
from detector_ia.services.oracles import OracleError, PerplexityOracle
from detector_ia.services.perplexity import PerplexitySampler
from detector_ia.services.scoring import ProbabilityModel, VerdictClassifier, normalize_perplexity
from detector_ia.services.sentence_scorer import SentenceScorer, highlight_sentences
from detector_ia.services.writing_analyzer import WritingAnalyzer
from detector_ia.utils.lexicon import default_lexicon

logger = logging.getLogger(__name__)

MIN_DETECTION_CHARS = 50

ProgressCallback = Callable[[str, int], None]


class SpanishAIDetector:
    """
    Heuristic estimator of how likely a Spanish passage is AI-generated.

    Runs in one of two modes: local-only, or with a perplexity oracle whose
    score joins the metric set and switches the weight table. A failing oracle
    never aborts the analysis; it falls back to the local table.
    """

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        perplexity_oracle: Optional[PerplexityOracle] = None,
        writing_analyzer: Optional[WritingAnalyzer] = None,
        lexicon: Optional[Mapping[str, Any]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config or DetectorConfig()
        lexicon = lexicon or default_lexicon()

        self.features = FeatureExtractor(lexicon)
        self.model = ProbabilityModel()
        self.classifier = VerdictClassifier(lexicon)
        self.sentence_scorer = SentenceScorer(lexicon)
        self.writing_analyzer = writing_analyzer

        self.sampler = None
        if perplexity_oracle is not None:
            self.sampler = PerplexitySampler(perplexity_oracle, self.config, sleep=sleep)
            logger.info("Perplexity oracle enabled; using enhanced weights")
        else:
            logger.info("No perplexity oracle configured; running local-only analysis")

    @property
    def using_api(self) -> bool:
        return self.sampler is not None

    def analyze_text(self, text: str, on_progress: Optional[ProgressCallback] = None) -> Optional[ProbabilityResult]:
        """
        Returns None for text shorter than 50 characters.
        """
        if not text or len(text.strip()) < MIN_DETECTION_CHARS:
            return None

        def report(message: str, percent: int):
            if on_progress:
                on_progress(message, percent)

        report("Analizando patrones lingüísticos...", 20)
        metrics = self.features.extract(text, include_burstiness=self.using_api)

        perplexity_score = None
        api_metrics = None
        if self.sampler is not None:
            try:
                report("Calculando perplejidad con IA...", 50)
                api_metrics = self.sampler.sample(text)
                perplexity_score = api_metrics.perplexity
                metrics["perplexity"] = normalize_perplexity(
                    perplexity_score, self.config.perplexity_low, self.config.perplexity_high
                )
            except OracleError as e:
                logger.warning(f"Error calculating perplexity, continuing locally: {e}")
                report("Continuando con análisis local...", 70)

        report("Calculando probabilidad final...", 80)
        probability = self.model.probability(metrics, using_oracle=self.using_api)
        sentence_scores = self.sentence_scorer.score(text)

        writing_stats = self.writing_analyzer.analyze(text) if self.writing_analyzer else None

        report("Análisis completado", 100)

        return ProbabilityResult(
            probability=probability,
            verdict=self.classifier.classify(probability),
            sentence_scores=sentence_scores,
            metrics=metrics,
            perplexity_score=perplexity_score,
            api_metrics=api_metrics,
            using_api=self.using_api,
            writing_stats=writing_stats,
            highlights=highlight_sentences(text, sentence_scores),
        )
