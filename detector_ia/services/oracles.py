"""
Contracts for the two optional external collaborators.

The scoring and paraphrasing code only talks to these protocols; the HTTP
adapters live in detector_ia.clients.
"""
from typing import Optional, Protocol, runtime_checkable


class OracleError(RuntimeError):
    """Transport failure, non-OK status or unparseable body from an oracle."""


@runtime_checkable
class PerplexityOracle(Protocol):
    def score(self, sentence: str) -> Optional[float]:
        """
        Perplexity estimate for one sentence. Returns None when the model
        answered with a shape that carries no score; raises OracleError when
        the call itself failed.
        """
        ...


@runtime_checkable
class ParaphraseOracle(Protocol):
    def generate(self, prompt: str, level: str, variant: int) -> str:
        """Generated rewrite for the prompt. Raises OracleError on failure."""
        ...
