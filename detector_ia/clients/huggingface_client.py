# Hugging Face inference adapter for the perplexity oracle
import logging
import math
from typing import Optional

import requests

from detector_ia.config import DetectorConfig
from detector_ia.services.oracles import OracleError

logger = logging.getLogger(__name__)


class HuggingFacePerplexityClient:
    """
    Sends one sentence per request to the hosted Spanish GPT-2 model.
    Single attempt per call; pacing between calls is the sampler's job.
    """

    def __init__(self, config: DetectorConfig, session: Optional[requests.Session] = None):
        if not config.perplexity_enabled:
            raise RuntimeError("HF_TOKEN missing in .env")
        self.config = config
        self.session = session or requests.Session()
        self.headers = {
            "Authorization": f"Bearer {config.huggingface_api_key}",
            "Content-Type": "application/json",
        }

    def score(self, sentence: str) -> Optional[float]:
        payload = {"inputs": sentence, "options": {"wait_for_model": True}}
        try:
            resp = self.session.post(
                self.config.perplexity_model_url,
                headers=self.headers,
                json=payload,
                timeout=self.config.request_timeout,
            )
        except requests.RequestException as e:
            raise OracleError(f"Hugging Face request failed: {e}") from e

        if resp.status_code != 200:
            raise OracleError(f"Hugging Face returned {resp.status_code}: {resp.text[:200]}")

        try:
            data = resp.json()
        except ValueError as e:
            raise OracleError(f"Unparseable Hugging Face response: {e}") from e

        return self.extract_perplexity(data)

    @staticmethod
    def extract_perplexity(data) -> Optional[float]:
        """exp(-score) for a `[{"score": s}, ...]` answer, otherwise None."""
        if not isinstance(data, list) or not data:
            return None
        first = data[0]
        if not isinstance(first, dict):
            return None
        raw_score = first.get("score")
        if not raw_score:
            return None
        try:
            return math.exp(-float(raw_score))
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Could not extract perplexity from score {raw_score!r}")
            return None
