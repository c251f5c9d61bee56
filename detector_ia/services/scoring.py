from types import MappingProxyType
from typing import Any, Mapping, Optional

from detector_ia.models.schemas import MetricDescription, Verdict
from detector_ia.utils.lexicon import default_lexicon

ORACLE_WEIGHTS = MappingProxyType({
    "perplexity": 0.30,
    "burstiness": 0.18,
    "patterns": 0.18,
    "manipulation": 0.12,
    "uniformity": 0.08,
    "naturalness": 0.08,
    "complexity": 0.03,
    "sentence_variation": 0.03,
})

LOCAL_WEIGHTS = MappingProxyType({
    "patterns": 0.28,
    "naturalness": 0.18,
    "manipulation": 0.15,
    "uniformity": 0.15,
    "sentence_variation": 0.12,
    "connectors": 0.10,
    "complexity": 0.02,
})

MANIPULATION_THRESHOLD = 50
MANIPULATION_BONUS = 10


class ProbabilityModel:
    """Weighted sum of the metric set, with one weight table per mode."""

    def select_weights(self, metrics: Mapping[str, float], using_oracle: bool) -> Mapping[str, float]:
        if using_oracle and "perplexity" in metrics:
            return ORACLE_WEIGHTS
        return LOCAL_WEIGHTS

    def probability(self, metrics: Mapping[str, float], using_oracle: bool = False) -> int:
        weights = self.select_weights(metrics, using_oracle)
        probability = sum(metrics[key] * weight for key, weight in weights.items() if key in metrics)

        if metrics.get("manipulation", 0) > MANIPULATION_THRESHOLD:
            probability = min(100.0, probability + MANIPULATION_BONUS)

        return int(min(100.0, max(0.0, probability)) + 0.5)


def normalize_perplexity(perplexity: float, low: float = 20.0, high: float = 50.0) -> float:
    """Maps a perplexity to 0-100, where 100 is the most predictable (AI-like)."""
    if perplexity <= low:
        return 100.0
    if perplexity >= high:
        return 0.0
    score = (high - perplexity) / (high - low) * 100
    return max(0.0, min(100.0, score))


class VerdictClassifier:
    def __init__(self, lexicon: Optional[Mapping[str, Any]] = None):
        self.texts = (lexicon or default_lexicon())["verdicts"]

    def classify(self, probability: int) -> Verdict:
        if probability >= 75:
            level = "high"
        elif probability >= 50:
            level = "medium"
        elif probability >= 25:
            level = "low"
        else:
            level = "very-low"
        entry = self.texts[level]
        return Verdict(text=entry["text"], level=level, description=entry["description"])


def describe_metric(value: float, metric: str, lexicon: Optional[Mapping[str, Any]] = None) -> MetricDescription:
    """Presentation label for a metric value; unknown metrics get a neutral dash."""
    ranges = (lexicon or default_lexicon())["metric_ranges"].get(metric, ())
    for upper, label, severity in ranges:
        if value <= upper:
            return MetricDescription(label=label, severity_class=severity)
    return MetricDescription(label="-", severity_class="low")
