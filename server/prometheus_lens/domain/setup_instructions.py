# server/prometheus_lens/domain/setup_instructions.py
"""
Étapes opérateur affichées par l'assistant, par type d'asset
(installation de l'exporter, pare-feu, vérification, config, reload).
"""

from __future__ import annotations

from typing import Optional

from prometheus_lens.domain.entities import AssetType

_RELOAD = "Reload Prometheus: `curl -X POST http://<prometheus_host>:9090/-/reload` or send SIGHUP."
_ADD_CONFIG = "Prometheus configuration: add the generated job under `scrape_configs` in `prometheus.yml`."

_NODE_EXPORTER = [
    "Install Node Exporter from https://prometheus.io/download/#node_exporter and run it as a systemd service.",
    "Firewall: open port 9100 (e.g. `sudo ufw allow 9100/tcp`).",
    "Verify metrics: `curl http://<server_ip>:9100/metrics`.",
    _ADD_CONFIG,
    _RELOAD,
]

_DATABASE = {
    AssetType.POSTGRESQL.value: ("postgres_exporter", "https://github.com/prometheus-community/postgres_exporter", "9187"),
    AssetType.MYSQL.value: ("mysqld_exporter", "https://github.com/prometheus/mysqld_exporter", "9104"),
    AssetType.MONGODB.value: ("mongodb_exporter", "https://github.com/percona/mongodb_exporter", "9216"),
    AssetType.DATABASE.value: ("postgres_exporter", "https://github.com/prometheus-community/postgres_exporter", "9187"),
}

_GENERIC = [
    "Expose metrics: the asset must serve Prometheus-compatible metrics over HTTP (often `/metrics`).",
    "Network access: confirm Prometheus can reach the endpoint (firewalls, routing).",
    _ADD_CONFIG,
    _RELOAD,
]


def _database_steps(asset_type: str) -> list[str]:
    exporter, url, port = _DATABASE[asset_type]
    return [
        f"Install {exporter} ({url}).",
        "Configure the connection (host, port, user, password), usually through `DATA_SOURCE_NAME`.",
        "Run the exporter with network access to the database.",
        f"Firewall: open the exporter port {port} to Prometheus.",
        f"Verify metrics: `curl http://<exporter_host>:{port}/metrics`.",
        _ADD_CONFIG,
        _RELOAD,
    ]


def setup_instructions(asset_type: Optional[str]) -> list[str]:
    """Liste ordonnée d'étapes ; liste générique pour un type inconnu."""
    if not asset_type:
        return ["Select an asset type to see specific instructions."]

    if asset_type in _DATABASE:
        return _database_steps(asset_type)

    if asset_type == AssetType.SERVER.value:
        return list(_NODE_EXPORTER)

    if asset_type == AssetType.UBUNTU_SERVER.value:
        return [
            "Install Node Exporter: `sudo apt-get install prometheus-node-exporter -y`, "
            "then `sudo systemctl enable --now prometheus-node-exporter`.",
            *_NODE_EXPORTER[1:],
        ]

    if asset_type == AssetType.WINDOWS_SERVER.value:
        return [
            "Install windows_exporter (MSI) from https://github.com/prometheus-community/windows_exporter/releases.",
            "Enable the relevant collectors (cpu, cs, logical_disk, net, os, service, system, memory).",
            "Firewall: allow inbound TCP 9182.",
            "Verify metrics: `http://<windows_server_ip>:9182/metrics`.",
            _ADD_CONFIG,
            _RELOAD,
        ]

    if asset_type == AssetType.DOCKER.value:
        return [
            "Run cAdvisor (gcr.io/cadvisor/cadvisor) on the Docker host, publishing port 8080.",
            "Verify metrics: `curl http://<docker_host_ip>:8080/metrics`.",
            _ADD_CONFIG,
            _RELOAD,
        ]

    if asset_type == AssetType.APPLICATION.value:
        return [
            "Expose metrics: instrument the application with a Prometheus client library (e.g. `prometheus-client`).",
            "Verify endpoint: `http://<app_host>:<app_port>/metrics` serves the text exposition format.",
            "Firewall: allow Prometheus to reach the application's metrics port.",
            _ADD_CONFIG,
            _RELOAD,
        ]

    if asset_type == AssetType.NETWORK.value:
        return [
            "Enable SNMP (v2c or v3) on the device and note the community string or credentials.",
            "Run an SNMP exporter (prom/snmp-exporter) with an `snmp.yml` containing the module (e.g. `if_mib`).",
            "Test: `curl \"http://<snmp_exporter_host>:9116/snmp?module=<module>&target=<device_ip>\"`.",
            "Edit the generated job so the `__address__` replacement points at your SNMP exporter.",
            _ADD_CONFIG,
            _RELOAD,
        ]

    if asset_type == AssetType.KUBERNETES.value:
        return [
            "Accessibility: Prometheus must reach the Kubernetes API server (`api_server`).",
            "Authentication: in-cluster, use the service account token; otherwise set `bearer_token_file`.",
            "RBAC: grant get/list/watch on nodes, services, endpoints and pods (ClusterRole + ClusterRoleBinding).",
            "Annotate pods with `prometheus.io/scrape: 'true'` and name the metrics container port `metrics`.",
            _ADD_CONFIG,
            _RELOAD,
        ]

    return list(_GENERIC)
