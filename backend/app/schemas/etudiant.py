"""
Schémas Pydantic pour les étudiants.
Le JSON échangé utilise des clés camelCase (firstName, lastName...) ;
les noms snake_case sont aussi acceptés en entrée.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Champs recopiés lors d'une mise à jour partielle (PATCH)
PATCHABLE_FIELDS = ("address", "last_name", "first_name", "age")


class EtudiantPayload(BaseModel):
    """
    Corps des requêtes POST / PUT / PATCH.
    Tous les champs sont optionnels : la présence de `id` est contrôlée par le router,
    pas par le schéma, afin de renvoyer les codes d'erreur idexists / idnull / idinvalid.
    """
    id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def entity_fields(self) -> dict:
        """Valeurs de tous les attributs de l'entité (hors id), absents compris."""
        return self.model_dump(exclude={"id"})

    def patch_fields(self) -> dict:
        """
        Valeurs à recopier pour un PATCH : champs fournis et non nuls uniquement.
        Un champ absent ou explicitement null laisse la valeur stockée inchangée ;
        une chaîne vide est une valeur et remplace la valeur stockée.
        """
        provided = self.model_dump(include=set(PATCHABLE_FIELDS), exclude_unset=True)
        return {field: value for field, value in provided.items() if value is not None}


class EtudiantResponse(BaseModel):
    """Représentation d'un étudiant renvoyée par l'API."""
    id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)
