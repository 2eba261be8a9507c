"""
Erreurs applicatives et format de réponse associé.

Une BadRequestAlertException produit une réponse 400 `application/problem+json` :
{
  "type": "https://www.jhipster.tech/problem/problem-with-message",
  "title": "Invalid id",
  "status": 400,
  "detail": "Invalid id",
  "path": "/api/etudiants/1",
  "message": "error.idnull",
  "entityName": "ms3Etudiant",
  "errorKey": "idnull",
  "params": "ms3Etudiant"
}
"""

from typing import Any, Dict

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.header_util import create_failure_alert

PROBLEM_WITH_MESSAGE_TYPE = "https://www.jhipster.tech/problem/problem-with-message"


class BadRequestAlertException(HTTPException):
    """
    Requête refusée pour une raison liée à l'entité (identifiant présent, absent, incohérent...).

    Exemple :
        raise BadRequestAlertException("Invalid id", "ms3Etudiant", "idnull")
    """

    def __init__(self, message: str, entity_name: str, error_key: str):
        self.message = message
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(
            status_code=400,
            detail={"message": message, "entityName": entity_name, "errorKey": error_key},
        )


def problem_payload(exc: BadRequestAlertException, path: str) -> Dict[str, Any]:
    """Construit le corps problem+json d'une BadRequestAlertException."""
    return {
        "type": PROBLEM_WITH_MESSAGE_TYPE,
        "title": exc.message,
        "status": exc.status_code,
        "detail": exc.message,
        "path": path,
        "message": f"error.{exc.error_key}",
        "entityName": exc.entity_name,
        "errorKey": exc.error_key,
        "params": exc.entity_name,
    }


async def bad_request_alert_handler(request: Request, exc: BadRequestAlertException) -> JSONResponse:
    """Handler FastAPI : payload problem+json et en-têtes X-<app>-error / X-<app>-params."""
    headers = create_failure_alert(
        settings.APP_NAME, settings.ENABLE_TRANSLATION, exc.entity_name, exc.error_key, exc.message
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=problem_payload(exc, request.url.path),
        headers=headers,
        media_type="application/problem+json",
    )
