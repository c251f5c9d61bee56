from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field


class ParaphraseLevel(str, Enum):
    light = "light"
    moderate = "moderate"
    heavy = "heavy"


class Verdict(BaseModel):
    text: str
    level: Literal["very-low", "low", "medium", "high"]
    description: str


class PerplexityStats(BaseModel):
    perplexity: float
    variance: float
    samples: int


class HighlightedSegment(BaseModel):
    text: str
    score: Optional[int] = None
    css_class: Optional[str] = None


class ProbabilityResult(BaseModel):
    probability: int = Field(ge=0, le=100)
    verdict: Verdict
    sentence_scores: List[int]
    metrics: Dict[str, float]
    perplexity_score: Optional[float] = None
    api_metrics: Optional[PerplexityStats] = None
    using_api: bool = False
    writing_stats: Optional[Dict] = None
    highlights: List[HighlightedSegment] = Field(default_factory=list)


class MetricDescription(BaseModel):
    label: str
    severity_class: str


class ParaphraseAlternative(BaseModel):
    text: str
    explanation: str
    level: ParaphraseLevel
    source: Literal["oracle", "rules"] = "rules"


class CitationWarning(BaseModel):
    type: Literal["quotation", "citation", "copyright"]
    message: str
    severity: Literal["medium", "high"]


class CitationSuggestions(BaseModel):
    apa: str
    mla: str
    chicago: str
    general: str
    advice: List[str]


class ParaphraseMetadata(BaseModel):
    fidelity_check: str
    fidelity_ratio: float
    tone: str
    rewrite_level: ParaphraseLevel


class ParaphraseResult(BaseModel):
    original: str
    alternatives: List[ParaphraseAlternative]
    level: str
    warnings: List[CitationWarning]
    citation_suggestions: CitationSuggestions
    metadata: ParaphraseMetadata


class MisuseFlag(BaseModel):
    type: Literal["academic", "attribution"]
    message: str


class AnalyzeRequest(BaseModel):
    text: str


class ParaphraseRequest(BaseModel):
    text: str
    level: ParaphraseLevel = ParaphraseLevel.moderate


class MisuseRequest(BaseModel):
    text: str
    purpose: str = ""


class AnalyzeResponse(BaseModel):
    result: Optional[ProbabilityResult] = None
