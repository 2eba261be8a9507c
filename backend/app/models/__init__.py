# Importe tous les modèles pour enregistrer leurs tables dans Base.metadata
# avant create_all et avant que les routers ne soient chargés.

from app.models.etudiant import Etudiant  # noqa: F401
