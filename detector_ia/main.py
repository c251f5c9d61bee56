from dotenv import load_dotenv

# Load env vars before any other imports to ensure they are available
load_dotenv()

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from detector_ia.routes import api

app = FastAPI(
    title="Detector de Texto IA en Español",
    description="Heuristic AI-authorship estimation and ethical paraphrasing for Spanish text.",
    version="1.0.0"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("uvicorn")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    client = request.client.host if request.client else "-"
    logger.info(f"Incoming request: {request.method} {request.url} from {client}")
    response = await call_next(request)
    return response

# Include API Routes
app.include_router(api.router)


@app.get("/")
async def root():
    return {"message": "Bienvenido al Detector de Texto IA en Español"}
