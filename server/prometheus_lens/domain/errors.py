from __future__ import annotations
"""
server/prometheus_lens/domain/errors.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Erreurs métier levées par les services.

La couche API (core/middleware.py) les traduit en réponses HTTP :
- ValidationError (et sous-classes)  -> 400
- NotFoundError                      -> 404
- PrometheusError (et sous-classes)  -> 500
"""

from typing import Optional


class LensError(Exception):
    """Racine des erreurs applicatives."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LensError):
    """Entrée invalide ; aucun état n'est modifié."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class CircularDependencyError(ValidationError):
    def __init__(self, message: str = "Circular parent folder dependency detected") -> None:
        super().__init__(message, field="parentId")


class InvalidParentChainError(ValidationError):
    def __init__(self, message: str = "Invalid parent folder chain") -> None:
        super().__init__(message, field="parentId")


class NotFoundError(LensError):
    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class PrometheusError(LensError):
    """Échec d'écriture ou de rechargement de la configuration Prometheus."""

    config_written: bool = False


class PrometheusConfigWriteError(PrometheusError):
    config_written = False


class PrometheusReloadError(PrometheusError):
    # Le fichier est déjà écrit : il n'est pas restauré, l'opérateur relance le reload.
    config_written = True
