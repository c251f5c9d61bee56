"""
Groq adapter for the paraphrase oracle.
"""
import logging
from typing import Optional

from groq import Groq

from detector_ia.config import DetectorConfig
from detector_ia.services.oracles import OracleError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "Eres un asistente de redacción en español. Devuelve SOLO el texto reescrito, "
    "sin comentarios ni comillas."
)


class GroqParaphraseClient:
    def __init__(self, config: DetectorConfig, client: Optional[Groq] = None):
        if client is None:
            if not config.generation_enabled:
                raise RuntimeError("GROQ_API_KEY missing in .env")
            client = Groq(api_key=config.groq_api_key)
        self.client = client
        self.config = config

    def temperature(self, variant: int) -> float:
        return self.config.base_temperature + variant * self.config.temperature_step

    def generate(self, prompt: str, level: str, variant: int) -> str:
        try:
            completion = self.client.chat.completions.create(
                model=self.config.groq_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                temperature=self.temperature(variant),
                top_p=0.9,
            )
            return completion.choices[0].message.content or ""
        except Exception as e:
            raise OracleError(f"Groq {level} rewrite (variant {variant}) failed: {e}") from e
