"""
Router pour les étudiants.
POST   /api/etudiants        : création
PUT    /api/etudiants/{id}   : remplacement complet
PATCH  /api/etudiants/{id}   : mise à jour partielle (champs non nuls uniquement)
GET    /api/etudiants        : listage
GET    /api/etudiants/{id}   : détail
DELETE /api/etudiants/{id}   : suppression (idempotente)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from app.config import settings
from app.errors import BadRequestAlertException
from app.header_util import (
    create_entity_creation_alert,
    create_entity_deletion_alert,
    create_entity_update_alert,
)
from app.models.etudiant import Etudiant
from app.repositories.etudiant_repository import EtudiantRepository, get_etudiant_repository
from app.schemas.etudiant import EtudiantPayload, EtudiantResponse

logger = logging.getLogger(__name__)

ENTITY_NAME = "ms3Etudiant"
BASE_PATH = "/api/etudiants"

router = APIRouter(prefix=BASE_PATH, tags=["Étudiants"])


def _check_update_target(etudiant_id: int, data: EtudiantPayload, repo: EtudiantRepository) -> None:
    """Contrôles communs à PUT et PATCH : id présent, identique au chemin, entité existante."""
    if data.id is None:
        raise BadRequestAlertException("Invalid id", ENTITY_NAME, "idnull")
    if data.id != etudiant_id:
        raise BadRequestAlertException("Invalid ID", ENTITY_NAME, "idinvalid")
    if not repo.exists_by_id(etudiant_id):
        raise BadRequestAlertException("Entity not found", ENTITY_NAME, "idnotfound")


@router.post("", response_model=EtudiantResponse, status_code=201, summary="Créer un étudiant")
def create_etudiant(
    data: EtudiantPayload,
    response: Response,
    repo: EtudiantRepository = Depends(get_etudiant_repository),
):
    """Crée un étudiant ; l'identifiant est attribué par la base et ne doit pas être fourni."""
    logger.debug("REST request to save Etudiant : %s", data)
    if data.id is not None:
        raise BadRequestAlertException("A new etudiant cannot already have an ID", ENTITY_NAME, "idexists")

    result = repo.save(Etudiant(**data.entity_fields()))

    response.headers["Location"] = f"{BASE_PATH}/{result.id}"
    response.headers.update(
        create_entity_creation_alert(settings.APP_NAME, settings.ENABLE_TRANSLATION, ENTITY_NAME, str(result.id))
    )
    return result


@router.put("/{etudiant_id}", response_model=EtudiantResponse, summary="Remplacer un étudiant")
def update_etudiant(
    etudiant_id: int,
    data: EtudiantPayload,
    response: Response,
    repo: EtudiantRepository = Depends(get_etudiant_repository),
):
    """Remplace tous les champs de l'étudiant ; un champ absent du corps est remis à null."""
    logger.debug("REST request to update Etudiant : %s, %s", etudiant_id, data)
    _check_update_target(etudiant_id, data, repo)

    result = repo.save(Etudiant(id=data.id, **data.entity_fields()))

    response.headers.update(
        create_entity_update_alert(settings.APP_NAME, settings.ENABLE_TRANSLATION, ENTITY_NAME, str(data.id))
    )
    return result


@router.patch("/{etudiant_id}", response_model=EtudiantResponse, summary="Mettre à jour partiellement un étudiant")
def partial_update_etudiant(
    etudiant_id: int,
    data: EtudiantPayload,
    response: Response,
    repo: EtudiantRepository = Depends(get_etudiant_repository),
):
    """
    Recopie sur l'étudiant existant les champs fournis et non nuls
    (adresse, nom, prénom, âge). Les autres champs sont conservés.
    """
    logger.debug("REST request to partial update Etudiant partially : %s, %s", etudiant_id, data)
    _check_update_target(etudiant_id, data, repo)

    existing = repo.find_by_id(data.id)
    if existing is None:
        # Supprimé entre le contrôle d'existence et la lecture
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")

    for field, value in data.patch_fields().items():
        setattr(existing, field, value)
    result = repo.save(existing)

    response.headers.update(
        create_entity_update_alert(settings.APP_NAME, settings.ENABLE_TRANSLATION, ENTITY_NAME, str(data.id))
    )
    return result


@router.get("", response_model=List[EtudiantResponse], summary="Lister les étudiants")
def list_etudiants(repo: EtudiantRepository = Depends(get_etudiant_repository)):
    """Retourne tous les étudiants dans l'ordre du stockage."""
    logger.debug("REST request to get all Etudiants")
    return repo.find_all()


@router.get("/{etudiant_id}", response_model=EtudiantResponse, summary="Détail d'un étudiant")
def get_etudiant(etudiant_id: int, repo: EtudiantRepository = Depends(get_etudiant_repository)):
    logger.debug("REST request to get Etudiant : %s", etudiant_id)
    etudiant = repo.find_by_id(etudiant_id)
    if etudiant is None:
        raise HTTPException(status_code=404, detail="Étudiant introuvable.")
    return etudiant


@router.delete("/{etudiant_id}", status_code=204, summary="Supprimer un étudiant")
def delete_etudiant(etudiant_id: int, repo: EtudiantRepository = Depends(get_etudiant_repository)):
    """Supprime l'étudiant. Répond 204 même s'il n'existait pas."""
    logger.debug("REST request to delete Etudiant : %s", etudiant_id)
    repo.delete_by_id(etudiant_id)
    return Response(
        status_code=204,
        headers=create_entity_deletion_alert(
            settings.APP_NAME, settings.ENABLE_TRANSLATION, ENTITY_NAME, str(etudiant_id)
        ),
    )
