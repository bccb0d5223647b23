"""
Point d'entrée principal de l'API d'inscription aux sujets.
Démarrage : uvicorn topic_registration.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import topic_registration.models  # noqa: F401 (enregistre tous les modèles dans Base.metadata avant les routers)
from topic_registration import database
from topic_registration.config import settings
from topic_registration.errors import ApiError
from topic_registration.routers import (
    configurations,
    groups,
    instructor_reviews,
    login,
    memberships,
    question_sets,
    registrations,
    topic_dates,
    topics,
    users,
)
from topic_registration.scheduler import start_scheduler, stop_scheduler

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Les identifiants transmis à la connexion ne passent jamais dans les logs
UNLOGGED_PATHS = {"/api/login"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Cycle de vie de l'application : la connexion à la base est établie en
    arrière-plan par le scheduler ; l'API accepte les requêtes dès le départ.
    """
    start_scheduler()
    yield
    stop_scheduler()
    database.dispose_db()


app = FastAPI(
    title="Topic Registration API",
    description="Inscription aux sujets, groupes et jeux de questions d'évaluation",
    version="0.1.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    response = await call_next(request)
    if request.url.path not in UNLOGGED_PATHS:
        logger.info("%s %s → %d", request.method, request.url.path, response.status_code)
    return response


app.include_router(login.router)
app.include_router(login.token_check_router)
app.include_router(groups.router)
app.include_router(memberships.router)
app.include_router(topics.router)
app.include_router(topic_dates.router)
app.include_router(question_sets.review_router)
app.include_router(question_sets.registration_router)
app.include_router(configurations.router)
app.include_router(registrations.router)
app.include_router(users.router)
app.include_router(instructor_reviews.router)


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Corps illisible ou mal typé : 400 comme les autres erreurs de validation."""
    logger.info("Requête invalide sur %s : %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "malformed request"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées pour garantir que la réponse 500
    passe bien par CORSMiddleware (qui injecte les headers CORS).
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(status_code=500, content={"error": "internal server error"})


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle et indique si la base est prête."""
    return {
        "status": "ok",
        "database": "ready" if database.is_ready() else "starting",
        "version": "0.1.0",
    }


def run() -> None:
    uvicorn.run("topic_registration.main:app", host="0.0.0.0", port=settings.PORT)
