"""
Accès aux données des étudiants.

EtudiantRepository décrit le contrat consommé par le router ;
SqlEtudiantRepository l'implémente au-dessus d'une session SQLAlchemy.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.etudiant import Etudiant

logger = logging.getLogger(__name__)


class EtudiantRepository(ABC):
    """Interface de stockage des étudiants, indexés par identifiant entier."""

    @abstractmethod
    def save(self, etudiant: Etudiant) -> Etudiant:
        """Insère ou remplace l'étudiant et le retourne avec son identifiant."""

    @abstractmethod
    def find_by_id(self, etudiant_id: int) -> Optional[Etudiant]:
        """Retourne l'étudiant, ou None s'il n'existe pas."""

    @abstractmethod
    def exists_by_id(self, etudiant_id: int) -> bool:
        ...

    @abstractmethod
    def find_all(self) -> List[Etudiant]:
        ...

    @abstractmethod
    def delete_by_id(self, etudiant_id: int) -> None:
        """Supprime l'étudiant ; aucune erreur s'il est déjà absent."""


class SqlEtudiantRepository(EtudiantRepository):
    """Implémentation SQLAlchemy : chaque écriture est validée (commit) immédiatement."""

    def __init__(self, db: Session):
        self.db = db

    def save(self, etudiant: Etudiant) -> Etudiant:
        if etudiant.id is None:
            self.db.add(etudiant)
        else:
            # merge remplace l'état de la ligne existante par celui de l'objet transmis
            etudiant = self.db.merge(etudiant)
        self.db.commit()
        self.db.refresh(etudiant)
        return etudiant

    def find_by_id(self, etudiant_id: int) -> Optional[Etudiant]:
        return self.db.get(Etudiant, etudiant_id)

    def exists_by_id(self, etudiant_id: int) -> bool:
        found = self.db.execute(
            select(Etudiant.id).where(Etudiant.id == etudiant_id)
        ).scalar()
        return found is not None

    def find_all(self) -> List[Etudiant]:
        return list(self.db.execute(select(Etudiant).order_by(Etudiant.id)).scalars().all())

    def delete_by_id(self, etudiant_id: int) -> None:
        result = self.db.execute(delete(Etudiant).where(Etudiant.id == etudiant_id))
        self.db.commit()
        if result.rowcount == 0:
            logger.debug("Suppression ignorée : étudiant %s absent", etudiant_id)


def get_etudiant_repository(db: Session = Depends(get_db)) -> EtudiantRepository:
    """Dépendance FastAPI — fournit le dépôt des étudiants lié à la session de la requête."""
    return SqlEtudiantRepository(db)
