from __future__ import annotations
"""
server/prometheus_lens/domain/config_generator.py
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Génération d'un job ``scrape_configs`` Prometheus à partir du formulaire
de l'assistant : (type, nom, param1, param2).

Deux sorties :
- stockage : le job seul (dict) -> ``asset.configuration``
- aperçu   : un document YAML ``scrape_configs: [job]`` précédé de notes

Fonction pure : aucune I/O, mêmes entrées -> même sortie.
"""

import copy
import re
from dataclasses import dataclass, field
from typing import Any, Optional

import yaml

from prometheus_lens.domain.entities import AssetType

INCOMPLETE_JOB_NAME = "incomplete_config"
INCOMPLETE_PREVIEW = "# Incomplete configuration: Name and Type are required.\n"

# Ports par défaut des exporters
NODE_EXPORTER_PORT = "9100"
WINDOWS_EXPORTER_PORT = "9182"
POSTGRES_EXPORTER_PORT = "9187"
MYSQL_EXPORTER_PORT = "9104"
MONGODB_EXPORTER_PORT = "9216"

DEFAULT_SNMP_MODULE = "if_mib"
# À remplacer à la main par l'adresse réelle du SNMP exporter.
SNMP_EXPORTER_PLACEHOLDER = "snmp-exporter:9116"

DEFAULT_TARGET_PLACEHOLDER = "TARGET_IP_OR_HOSTNAME"

_DEFAULT_PORTS: dict[str, str] = {
    AssetType.SERVER.value: NODE_EXPORTER_PORT,
    AssetType.UBUNTU_SERVER.value: NODE_EXPORTER_PORT,
    AssetType.WINDOWS_SERVER.value: WINDOWS_EXPORTER_PORT,
    AssetType.DATABASE.value: POSTGRES_EXPORTER_PORT,
    AssetType.POSTGRESQL.value: POSTGRES_EXPORTER_PORT,
    AssetType.MYSQL.value: MYSQL_EXPORTER_PORT,
    AssetType.MONGODB.value: MONGODB_EXPORTER_PORT,
}

# Libellés d'aide affichés par l'assistant pour param1 / param2.
PARAM_HINTS: dict[str, tuple[str, str]] = {
    AssetType.SERVER.value: ("Server IP Address (e.g., 192.168.1.100)", "Node Exporter Port (e.g., 9100)"),
    AssetType.UBUNTU_SERVER.value: ("Ubuntu Server IP (e.g., 192.168.1.101)", "Node Exporter Port (e.g., 9100)"),
    AssetType.WINDOWS_SERVER.value: ("Windows Server IP (e.g., 192.168.1.102)", "Windows Exporter Port (e.g., 9182)"),
    AssetType.NETWORK.value: ("Device IP / Hostname", "SNMP Module (e.g., if_mib)"),
    AssetType.APPLICATION.value: ("Metrics Endpoint URL (e.g., http://app/metrics)", "Application Port (optional, if not in URL)"),
    AssetType.DATABASE.value: ("Database Exporter Host", "Exporter Port (e.g., 9187)"),
    AssetType.POSTGRESQL.value: ("postgres_exporter Host", "Exporter Port (e.g., 9187)"),
    AssetType.MYSQL.value: ("mysqld_exporter Host", "Exporter Port (e.g., 9104)"),
    AssetType.MONGODB.value: ("mongodb_exporter Host", "Exporter Port (e.g., 9216)"),
    AssetType.KUBERNETES.value: (
        "API Server URL (e.g., https://kube-api.example.com)",
        "Bearer Token File Path (optional, e.g., /var/run/secrets/kubernetes.io/serviceaccount/token)",
    ),
    AssetType.DOCKER.value: ("Exporter host:port (e.g., cadvisor:8080)", "Metrics Path (optional, e.g., /metrics)"),
}

_WHITESPACE = re.compile(r"\s+")


def job_name_from(name: str) -> str:
    """'My Server 01' -> 'my_server_01', ' My Server' -> '_my_server' (pas de strip)."""
    return _WHITESPACE.sub("_", name.lower())


@dataclass(frozen=True)
class GeneratedConfig:
    """Résultat de l'assistant : le job + des notes destinées à l'aperçu."""

    job: dict[str, Any]
    notes: tuple[str, ...] = field(default_factory=tuple)
    complete: bool = True

    def to_storage(self) -> dict[str, Any]:
        """Le job seul, tel qu'enregistré dans ``asset.configuration``."""
        return copy.deepcopy(self.job)

    def to_preview(self) -> str:
        if not self.complete:
            return INCOMPLETE_PREVIEW
        header = "".join(f"# {n}\n" for n in self.notes)
        body = yaml.safe_dump({"scrape_configs": [self.job]}, sort_keys=False, default_flow_style=False)
        return header + body


def _clean(v: Optional[str]) -> Optional[str]:
    if v is None:
        return None
    v = str(v).strip()
    return v or None


def _static(job_name: str, target: str, **extra: Any) -> dict[str, Any]:
    job: dict[str, Any] = {"job_name": job_name, "static_configs": [{"targets": [target]}]}
    job.update(extra)
    return job


def generate_scrape_config(
    asset_type: Optional[str],
    name: Optional[str],
    param1: Optional[str] = None,
    param2: Optional[str] = None,
) -> GeneratedConfig:
    """
    Construit le job Prometheus d'un asset.

    Un type ou un nom manquant ne lève pas : on renvoie un résultat
    ``complete=False`` (job ``incomplete_config``).
    Type inconnu -> job générique ``static_configs`` sur ``param1[:param2]``.
    """
    asset_type = _clean(asset_type)
    if not asset_type or not _clean(name):
        return GeneratedConfig(job={"job_name": INCOMPLETE_JOB_NAME}, complete=False)

    job_name = job_name_from(str(name))
    p1, p2 = _clean(param1), _clean(param2)
    notes: list[str] = []

    if asset_type in _DEFAULT_PORTS:
        host = p1 or DEFAULT_TARGET_PLACEHOLDER
        job = _static(job_name, f"{host}:{p2 or _DEFAULT_PORTS[asset_type]}")

    elif asset_type == AssetType.APPLICATION.value:
        job = _static(job_name, p1 or "http://app-host/metrics")
        if p2:
            notes.append(f"Note: Port {p2} provided, ensure it's part of the target URL if needed.")

    elif asset_type == AssetType.KUBERNETES.value:
        sd: dict[str, Any] = {"role": "pod", "api_server": p1 or "YOUR_K8S_API_SERVER_URL"}
        if p2:
            sd["bearer_token_file"] = p2
        else:
            notes.append(
                "bearer_token_file omitted: in-cluster Prometheus uses "
                "/var/run/secrets/kubernetes.io/serviceaccount/token"
            )
        job = {
            "job_name": job_name,
            "kubernetes_sd_configs": [sd],
            "relabel_configs": [
                {
                    "source_labels": ["__meta_kubernetes_pod_annotation_prometheus_io_scrape"],
                    "action": "keep",
                    "regex": "true",
                },
                {
                    "source_labels": ["__meta_kubernetes_pod_container_port_name"],
                    "action": "keep",
                    "regex": "metrics",
                },
            ],
        }

    elif asset_type == AssetType.NETWORK.value:
        job = _static(
            job_name,
            p1 or "NETWORK_DEVICE_IP_OR_HOSTNAME",
            metrics_path="/snmp",
            params={"module": [p2 or DEFAULT_SNMP_MODULE]},
            relabel_configs=[
                {"source_labels": ["__address__"], "target_label": "__param_target"},
                {"source_labels": ["__param_target"], "target_label": "instance"},
                {"target_label": "__address__", "replacement": SNMP_EXPORTER_PLACEHOLDER},
            ],
        )
        notes.append("The static target is the network device, polled through the SNMP exporter.")
        notes.append(f"Edit the '{SNMP_EXPORTER_PLACEHOLDER}' replacement to point at your SNMP exporter.")

    elif asset_type == AssetType.DOCKER.value:
        job = _static(job_name, p1 or "cadvisor_or_exporter_host:port", metrics_path=p2 or "/metrics")

    else:
        target = p1 or DEFAULT_TARGET_PLACEHOLDER
        job = _static(job_name, f"{target}:{p2}" if p2 else target)
        notes.append(f"Configuration for {asset_type} type is generic.")
        notes.append("Please adapt based on the specific exporter or metrics endpoint.")

    return GeneratedConfig(job=job, notes=tuple(notes))
