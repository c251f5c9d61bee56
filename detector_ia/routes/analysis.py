import logging
from functools import lru_cache
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from detector_ia.clients.groq_client import GroqParaphraseClient
from detector_ia.clients.huggingface_client import HuggingFacePerplexityClient
from detector_ia.config import DetectorConfig
from detector_ia.models.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    MetricDescription,
    MisuseFlag,
    MisuseRequest,
    ParaphraseRequest,
    ParaphraseResult,
)
from detector_ia.services.citation_advisor import CitationAdvisor
from detector_ia.services.detector import SpanishAIDetector
from detector_ia.services.paraphraser import ParaphraseEngine, ParaphraseInputError
from detector_ia.services.scoring import describe_metric
from detector_ia.services.writing_analyzer import WritingAnalyzer

logger = logging.getLogger(__name__)

router = APIRouter()


@lru_cache(maxsize=1)
def get_config() -> DetectorConfig:
    return DetectorConfig.from_env()


@lru_cache(maxsize=1)
def get_detector() -> SpanishAIDetector:
    config = get_config()
    oracle = HuggingFacePerplexityClient(config) if config.perplexity_enabled else None
    return SpanishAIDetector(config, perplexity_oracle=oracle, writing_analyzer=WritingAnalyzer())


@lru_cache(maxsize=1)
def get_paraphraser() -> ParaphraseEngine:
    config = get_config()
    oracle = GroqParaphraseClient(config) if config.generation_enabled else None
    return ParaphraseEngine(oracle=oracle)


@lru_cache(maxsize=1)
def get_advisor() -> CitationAdvisor:
    return CitationAdvisor()


@router.post("/analyze", response_model=AnalyzeResponse)
def analyze(request: AnalyzeRequest, detector: SpanishAIDetector = Depends(get_detector)):
    """
    Estimate the AI-generation probability of a Spanish passage.
    Text under 50 characters yields a null result.
    """
    return AnalyzeResponse(result=detector.analyze_text(request.text))


@router.post("/paraphrase", response_model=ParaphraseResult)
def paraphrase(request: ParaphraseRequest, engine: ParaphraseEngine = Depends(get_paraphraser)):
    """
    Three ethically-flagged rewrites at the requested level.
    """
    try:
        return engine.paraphrase(request.text, request.level)
    except ParaphraseInputError as e:
        logger.warning(f"Rejected paraphrase request: {e}")
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/misuse", response_model=List[MisuseFlag])
def misuse(request: MisuseRequest, advisor: CitationAdvisor = Depends(get_advisor)):
    return advisor.detect_misuse(request.text, request.purpose)


@router.get("/metrics/{metric}", response_model=MetricDescription)
def metric_description(metric: str, value: float = Query(..., ge=0, le=100)):
    return describe_metric(value, metric)
