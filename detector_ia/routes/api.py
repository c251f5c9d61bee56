from fastapi import APIRouter
from detector_ia.routes import analysis

router = APIRouter()

router.include_router(analysis.router, prefix="/api", tags=["Detección IA y paráfrasis"])
