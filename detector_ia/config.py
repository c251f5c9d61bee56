import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel

PLACEHOLDER_KEY = "YOUR_API_KEY_HERE"


def _usable_key(value: Optional[str]) -> Optional[str]:
    if not value or PLACEHOLDER_KEY in value:
        return None
    return value


class DetectorConfig(BaseModel):
    # Hugging Face inference (perplexity + generation)
    huggingface_api_key: Optional[str] = None
    api_url: str = "https://api-inference.huggingface.co/models/"
    perplexity_model: str = "PlanTL-GOB-ES/gpt2-large-bne"

    # Groq (paraphrase generation)
    groq_api_key: Optional[str] = None
    groq_model: str = "llama-3.3-70b-versatile"

    # Detection thresholds
    perplexity_low: float = 20.0
    perplexity_high: float = 50.0

    # Sampling / pacing
    max_sampled_sentences: int = 10
    min_sampled_sentence_chars: int = 10
    request_delay: float = 0.2
    request_timeout: float = 30.0

    # Generation
    base_temperature: float = 0.7
    temperature_step: float = 0.15

    @property
    def perplexity_enabled(self) -> bool:
        return _usable_key(self.huggingface_api_key) is not None

    @property
    def generation_enabled(self) -> bool:
        return _usable_key(self.groq_api_key) is not None

    @property
    def perplexity_model_url(self) -> str:
        return self.api_url + self.perplexity_model

    @classmethod
    def from_env(cls) -> "DetectorConfig":
        """Builds a config from the environment (and a .env file if present)."""
        load_dotenv()
        return cls(
            huggingface_api_key=_usable_key(os.getenv("HF_TOKEN") or os.getenv("HUGGINGFACE_API_KEY")),
            api_url=os.getenv("HF_API_URL", cls.model_fields["api_url"].default),
            perplexity_model=os.getenv("PERPLEXITY_MODEL", cls.model_fields["perplexity_model"].default),
            groq_api_key=_usable_key(os.getenv("GROQ_API_KEY")),
            groq_model=os.getenv("GROQ_MODEL", cls.model_fields["groq_model"].default),
            perplexity_low=float(os.getenv("PERPLEXITY_LOW", 20)),
            perplexity_high=float(os.getenv("PERPLEXITY_HIGH", 50)),
            request_delay=float(os.getenv("REQUEST_DELAY", 0.2)),
            request_timeout=float(os.getenv("REQUEST_TIMEOUT", 30)),
        )
