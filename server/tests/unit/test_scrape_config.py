# server/tests/unit/test_scrape_config.py
import pytest

from prometheus_lens.domain.config_generator import generate_scrape_config
from prometheus_lens.domain.scrape_config import (
    GenericScrapeJob,
    KubernetesScrapeJob,
    StaticScrapeJob,
    parse_scrape_job,
    primary_target,
    scrape_job_kind,
)

pytestmark = pytest.mark.unit


def test_static_job_is_recognized_and_keeps_extra_fields():
    cfg = {"job_name": "alpha", "scrape_interval": "15s", "static_configs": [{"targets": ["a:9100", "b:9100"]}]}
    job = parse_scrape_job(cfg)
    assert isinstance(job, StaticScrapeJob)
    assert job.model_dump(exclude_none=True)["scrape_interval"] == "15s"
    assert primary_target(cfg) == "a:9100"


def test_kubernetes_job_is_recognized():
    cfg = generate_scrape_config("Kubernetes", "k", "https://kube").to_storage()
    assert isinstance(parse_scrape_job(cfg), KubernetesScrapeJob)
    assert scrape_job_kind(cfg) == "kubernetes"
    assert primary_target(cfg) is None


def test_unknown_shape_falls_back_to_generic():
    cfg = {"job_name": "custom", "file_sd_configs": [{"files": ["/etc/targets.json"]}]}
    job = parse_scrape_job(cfg)
    assert isinstance(job, GenericScrapeJob)
    assert job.model_dump()["file_sd_configs"] == cfg["file_sd_configs"]
    assert scrape_job_kind(cfg) == "generic"


@pytest.mark.parametrize(
    "cfg",
    [
        None,
        {},
        {"job_name": "x", "static_configs": []},
        {"job_name": "x", "static_configs": [{"targets": []}]},
        {"job_name": "x", "static_configs": [{"targets": ["   "]}]},
    ],
)
def test_no_primary_target(cfg):
    assert primary_target(cfg) is None


def test_primary_target_is_stripped():
    assert primary_target({"static_configs": [{"targets": [" 10.0.0.5:9100 "]}]}) == "10.0.0.5:9100"


def test_empty_kind():
    assert scrape_job_kind({}) == "empty"
    assert scrape_job_kind(None) == "empty"


@pytest.mark.parametrize(
    "cfg",
    [
        {"job_name": "x", "static_configs": [{"targets": ["h:9100"], "labels": {"rack": 3}}]},
        {"job_name": "x", "params": {"module": "if_mib"}, "static_configs": [{"targets": ["h:9100"]}]},
        {"job_name": "x", "static_configs": [{"targets": ["h:9100", 42]}]},
    ],
)
def test_loosely_typed_static_jobs_keep_their_target(cfg):
    assert primary_target(cfg) == "h:9100"
    assert scrape_job_kind(cfg) == "static"


def test_non_string_first_target_is_ignored():
    assert primary_target({"static_configs": [{"targets": [9100]}]}) is None
    assert primary_target({"static_configs": ["h:9100"]}) is None
