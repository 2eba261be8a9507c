"""
Point d'entrée principal de l'API Étudiants.
Démarrage : uvicorn app.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import app.models  # noqa: F401 — enregistre tous les modèles dans Base.metadata avant les routers
from app.config import settings
from app.database import create_tables
from app.errors import BadRequestAlertException, bad_request_alert_handler
from app.routers import etudiants

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"


def configure_logging() -> None:
    """Niveau du logger `app` depuis LOG_LEVEL ; handler racine ajouté seulement si aucun n'existe."""
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    logging.getLogger("app").setLevel(settings.LOG_LEVEL.upper())


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Cycle de vie de l'application : journalisation et création des tables manquantes."""
    configure_logging()
    if settings.AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Tables vérifiées sur %s", settings.DATABASE_URL.split("@")[-1])
    yield


app = FastAPI(
    title="Étudiants API",
    description="API REST de gestion des étudiants (CRUD)",
    version=API_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

# CORS — autorise tous les ports localhost en développement (à restreindre en production).
# Les en-têtes X-<app>-* doivent être exposés pour être lisibles côté navigateur.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_origin_regex=r"https?://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
    expose_headers=[
        "Location",
        f"X-{settings.APP_NAME}-alert",
        f"X-{settings.APP_NAME}-error",
        f"X-{settings.APP_NAME}-params",
    ],
)


app.include_router(etudiants.router)

app.add_exception_handler(BadRequestAlertException, bad_request_alert_handler)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Intercepte toutes les exceptions non gérées (ex. panne de la base) pour garantir
    que la réponse 500 passe bien par CORSMiddleware.
    """
    logger.error("Exception non gérée : %s", exc, exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "Une erreur interne est survenue."},
    )


@app.get("/api/health", tags=["Santé"])
def health_check():
    """Vérifie que l'API est opérationnelle."""
    return {"status": "ok", "service": "Étudiants API", "version": API_VERSION}
