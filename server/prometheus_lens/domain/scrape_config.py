from __future__ import annotations
"""
server/prometheus_lens/domain/scrape_config.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Formes connues d'un job Prometheus stocké dans ``asset.configuration``.

- StaticScrapeJob      : ``static_configs`` (serveurs, bases, applis, docker, SNMP)
- KubernetesScrapeJob  : ``kubernetes_sd_configs``
- GenericScrapeJob     : tout autre objet structuré (jobs personnalisés)

Un objet qui ne respecte aucune forme connue retombe sur GenericScrapeJob,
donc un dict n'est jamais rejeté. Les champs non déclarés sont conservés
(extra="allow").
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError


class StaticTargetGroup(BaseModel):
    model_config = ConfigDict(extra="allow")

    targets: list[Any] = Field(default_factory=list)
    labels: Optional[dict[str, Any]] = None


class StaticScrapeJob(BaseModel):
    model_config = ConfigDict(extra="allow")

    job_name: Optional[str] = None
    static_configs: list[StaticTargetGroup]
    metrics_path: Optional[str] = None
    params: Optional[dict[str, Any]] = None
    relabel_configs: Optional[list[Any]] = None


class KubernetesSDConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    role: str = "pod"
    api_server: Optional[str] = None
    bearer_token_file: Optional[str] = None


class KubernetesScrapeJob(BaseModel):
    model_config = ConfigDict(extra="allow")

    job_name: Optional[str] = None
    kubernetes_sd_configs: list[KubernetesSDConfig]
    relabel_configs: Optional[list[Any]] = None


class GenericScrapeJob(BaseModel):
    model_config = ConfigDict(extra="allow")


ScrapeJob = Union[StaticScrapeJob, KubernetesScrapeJob, GenericScrapeJob]

# Ordre d'essai : formes connues d'abord, GenericScrapeJob en dernier recours.
_KNOWN_SHAPES = (StaticScrapeJob, KubernetesScrapeJob)


def parse_scrape_job(configuration: Mapping[str, Any]) -> ScrapeJob:
    data = dict(configuration)
    for shape in _KNOWN_SHAPES:
        try:
            return shape.model_validate(data)
        except PydanticValidationError:
            continue
    return GenericScrapeJob.model_validate(data)


def scrape_job_kind(configuration: Optional[Mapping[str, Any]]) -> str:
    """'static' | 'kubernetes' | 'generic' | 'empty' (pour l'affichage)."""
    if not configuration:
        return "empty"
    job = parse_scrape_job(configuration)
    if isinstance(job, StaticScrapeJob):
        return "static"
    if isinstance(job, KubernetesScrapeJob):
        return "kubernetes"
    return "generic"


def primary_target(configuration: Optional[Mapping[str, Any]]) -> Optional[str]:
    """
    Première cible du premier groupe ``static_configs``, sinon None.
    Lue directement dans le mapping brut : des labels numériques ou un
    ``params`` non normalisé ne doivent pas masquer la cible.
    """
    if not configuration:
        return None
    groups = configuration.get("static_configs")
    if not isinstance(groups, list) or not groups or not isinstance(groups[0], Mapping):
        return None
    targets = groups[0].get("targets")
    if not isinstance(targets, list) or not targets:
        return None
    first = targets[0]
    if not isinstance(first, str) or not first.strip():
        return None
    return first.strip()
