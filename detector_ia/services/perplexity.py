import logging
import time
from typing import Callable, List, Optional

import numpy as np

from detector_ia.config import DetectorConfig
from detector_ia.models.schemas import PerplexityStats
from detector_ia.services.oracles import OracleError, PerplexityOracle
from detector_ia.utils.text_processing import get_sentences

logger = logging.getLogger(__name__)


def estimate_perplexity(sentence: str) -> float:
    """
    Local stand-in when the model answers without a usable score: more
    diverse wording reads as less predictable.
    """
    words = sentence.split()
    if not words:
        return 20.0
    diversity = len({w.lower() for w in words}) / len(words)
    return 20 + diversity * 50


class PerplexitySampler:
    """
    Scores the first sentences of a text with the perplexity oracle, one call
    at a time with a fixed pause between calls.
    """

    def __init__(
        self,
        oracle: PerplexityOracle,
        config: Optional[DetectorConfig] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.oracle = oracle
        self.config = config or DetectorConfig()
        self.sleep = sleep

    def sample(self, text: str) -> PerplexityStats:
        """Raises OracleError when no sentence yields a score."""
        estimates: List[float] = []
        sentences = get_sentences(text)[: self.config.max_sampled_sentences]

        for sentence in sentences:
            if len(sentence) < self.config.min_sampled_sentence_chars:
                continue
            try:
                value = self.oracle.score(sentence)
                if value is None:
                    value = estimate_perplexity(sentence)
                estimates.append(float(value))
            except OracleError as e:
                logger.warning(f"Perplexity scoring failed for sentence: {e}")
            self.sleep(self.config.request_delay)

        if not estimates:
            raise OracleError("No perplexity scores calculated")

        values = np.asarray(estimates, dtype=np.float64)
        return PerplexityStats(
            perplexity=float(values.mean()),
            variance=float(values.var()),
            samples=len(estimates),
        )
