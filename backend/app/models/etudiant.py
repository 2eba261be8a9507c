"""
Modèle SQLAlchemy pour la table etudiant.
Les colonnes gardent les noms français du schéma ; les attributs Python sont en anglais.
"""

from sqlalchemy import Column, Integer, String

from app.database import Base


class Etudiant(Base):
    __tablename__ = "etudiant"
    # Sans AUTOINCREMENT, SQLite réattribue max(rowid)+1 après suppression de la dernière ligne
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    address = Column("adresse", String(255), nullable=True)
    last_name = Column("nom", String(100), nullable=True)
    first_name = Column("prenom", String(100), nullable=True)
    age = Column(Integer, nullable=True)

    def __repr__(self) -> str:
        return (
            f"Etudiant(id={self.id!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, address={self.address!r}, age={self.age!r})"
        )
