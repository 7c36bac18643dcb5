#!/usr/bin/env python3
from __future__ import annotations

"""
seed_demo_data.py

Jeu de données de démonstration (dossiers + assets) pour un environnement neuf.
Idempotent : relançable sans créer de doublons (clé = nom).

Contenu
-------
- 4 dossiers, dont "Core Databases" sous "Production Servers"
- 6 assets (Server, Application, Network, Database, Kubernetes, Server sans dossier)

Garde-fous
----------
- SEED_DEMO_DATA=true requis
- En prod (APP_ENV=production/prod) => refus sauf ALLOW_PROD_SEED=true

Connexion DB
------------
- DATABASE_URL (cf. prometheus_lens.core.config)
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

from prometheus_lens.application.services.asset_service import AssetService
from prometheus_lens.application.services.folder_service import FolderService
from prometheus_lens.core.logging import setup_logging
from prometheus_lens.infrastructure.persistence.database.session import get_sync_session
from prometheus_lens.infrastructure.persistence.repositories.unit_of_work import SqlAlchemyUnitOfWork

logger = logging.getLogger("seed_demo_data")


# ------------------------------- Guards / env --------------------------------

def _env(name: str, default: Optional[str] = None) -> str:
    v = os.getenv(name)
    if v is None:
        return default or ""
    return v.strip()


def _truthy(v: str) -> bool:
    return v.strip().lower() in {"1", "true", "yes", "y", "on"}


def _check_guards() -> None:
    if not _truthy(_env("SEED_DEMO_DATA", "false")):
        raise SystemExit("Refus : positionner SEED_DEMO_DATA=true pour injecter les données de démo.")
    if _env("APP_ENV").lower() in {"prod", "production"} and not _truthy(_env("ALLOW_PROD_SEED", "false")):
        raise SystemExit("Refus : APP_ENV=production. Positionner ALLOW_PROD_SEED=true pour forcer.")


# --------------------------------- Données -----------------------------------

# (nom, nom du parent)
FOLDERS: List[tuple[str, Optional[str]]] = [
    ("Production Servers", None),
    ("Staging Applications", None),
    ("Core Databases", "Production Servers"),
    ("Networking Gear", None),
]

ASSETS: List[Dict[str, Any]] = [
    {
        "name": "Alpha Web Server Cluster",
        "type": "Server",
        "folder": "Production Servers",
        "grafana_link": "https://grafana.example.com/d/abcdef/alpha-web-server",
        "tags": ["web", "nginx", "critical"],
        "configuration": {
            "job_name": "alpha_web",
            "scrape_interval": "15s",
            "metrics_path": "/metrics",
            "static_configs": [{"targets": ["alpha-node-1:9100", "alpha-node-2:9100"]}],
        },
    },
    {
        "name": "Beta API Gateway",
        "type": "Application",
        "folder": "Staging Applications",
        "tags": ["api", "nodejs", "staging"],
        "configuration": {"job_name": "beta_api", "static_configs": [{"targets": ["beta-api-instance:8080"]}]},
    },
    {
        "name": "Core Network Switch - Datacenter A",
        "type": "Network",
        "folder": "Networking Gear",
        "tags": ["core", "snmp", "cisco"],
        "config_param1": "10.0.1.1",
        "config_param2": "if_mib",
    },
    {
        "name": "Production PostgreSQL DB",
        "type": "Database",
        "folder": "Core Databases",
        "grafana_link": "https://grafana.example.com/d/ghijkl/prod-db",
        "tags": ["db", "postgres", "critical", "rds"],
        "config_param1": "postgres-primary",
    },
    {
        "name": "Staging Kubernetes Cluster",
        "type": "Kubernetes",
        "folder": "Staging Applications",
        "tags": ["k8s", "staging", "microservices"],
        "config_param1": "https://k8s.staging.example.com",
    },
    {
        "name": "Legacy App Server",
        "type": "Server",
        "folder": None,
        "tags": ["java", "tomcat"],
        "configuration": {"job_name": "legacy_app", "static_configs": [{"targets": ["legacy-app:8000"]}]},
    },
]


# ------------------------------- Provisioning --------------------------------

def seed(uow) -> Dict[str, int]:
    """Crée ce qui manque ; retourne le nombre de dossiers / assets créés."""
    folders = FolderService(uow)
    assets = AssetService(uow)

    folder_ids = {f.name: f.id for f in folders.list_folders()}
    created_folders = 0
    for name, parent in FOLDERS:
        if name in folder_ids:
            continue
        f = folders.create_folder(name, folder_ids.get(parent) if parent else None)
        folder_ids[name] = f.id
        created_folders += 1

    existing = {a.name for a in assets.list_assets()}
    created_assets = 0
    for item in ASSETS:
        if item["name"] in existing:
            continue
        assets.create_asset(
            item["name"],
            item["type"],
            grafana_link=item.get("grafana_link"),
            tags=item.get("tags"),
            folder_id=folder_ids.get(item["folder"]) if item.get("folder") else None,
            configuration=item.get("configuration"),
            config_param1=item.get("config_param1"),
            config_param2=item.get("config_param2"),
        )
        created_assets += 1

    return {"folders": created_folders, "assets": created_assets}


def main(argv: List[str]) -> None:
    if len(argv) != 1:
        raise SystemExit(
            "Usage: SEED_DEMO_DATA=true DATABASE_URL=... python server/scripts/seed_demo_data.py"
        )
    _check_guards()
    setup_logging()
    with get_sync_session() as s:
        counts = seed(SqlAlchemyUnitOfWork(s))
    logger.info("Démo : %d dossier(s), %d asset(s) créés", counts["folders"], counts["assets"])


if __name__ == "__main__":
    main(sys.argv)
