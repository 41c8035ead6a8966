from __future__ import annotations

import json
import ssl
from pathlib import Path

import pytest

from servicefabric.config import ClientConfig, load_cluster_profiles, normalize_endpoint


def test_from_profile_loads_cluster_file_shape(tmp_path: Path) -> None:
    config_path = tmp_path / "clusters.json"
    config_path.write_text(
        json.dumps(
            {
                "currentCluster": "prod",
                "clusters": {
                    "prod": {
                        "endpoint": "sf-prod.westus.cloudapp.azure.com:19080/",
                        "apiVersion": "7.2",
                        "timeoutMs": 45000,
                        "serverTimeout": 120,
                        "headers": {"x-test": "ok", "x-blank": "  "},
                        "auth": {"bearer": "abc"},
                        "verify": False,
                    }
                },
            }
        ),
        encoding="utf-8",
    )

    cfg = ClientConfig.from_profile(config_path=config_path)
    assert cfg.endpoint == "https://sf-prod.westus.cloudapp.azure.com:19080"
    assert cfg.api_version == "7.2"
    assert cfg.timeout_seconds == 45.0
    assert cfg.server_timeout == 120
    assert cfg.headers == {"x-test": "ok", "Authorization": "Bearer abc"}
    assert cfg.verify is False


def test_from_profile_falls_back_to_local_and_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "clusters.json"
    config_path.write_text(
        json.dumps({"clusters": {"local": {"endpoint": "http://127.0.0.1:19080"}}}),
        encoding="utf-8",
    )

    cfg = ClientConfig.from_profile("missing", config_path=config_path)
    assert cfg.endpoint == "http://127.0.0.1:19080"
    assert cfg.api_version == "6.0"
    assert cfg.server_timeout == 60


def test_malformed_profile_file_is_ignored(tmp_path: Path) -> None:
    config_path = tmp_path / "clusters.json"
    config_path.write_text("{not json", encoding="utf-8")

    assert load_cluster_profiles(config_path=config_path) == {"currentCluster": "local", "clusters": {}}
    assert ClientConfig.from_profile(config_path=config_path).endpoint == "http://localhost:19080"

    numeric_current = {"currentCluster": 5, "clusters": {"local": {"serverTimeout": 30}}}
    config_path.write_text(json.dumps(numeric_current), encoding="utf-8")
    assert ClientConfig.from_profile(config_path=config_path).server_timeout == 30
    config_path.write_text(json.dumps({"currentCluster": ["prod"], "clusters": []}), encoding="utf-8")
    assert ClientConfig.from_profile(config_path=config_path).endpoint == "http://localhost:19080"


def test_from_env_reads_cluster_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SF_CLUSTER_ENDPOINT", "https://mycluster:19080")
    monkeypatch.setenv("SF_API_VERSION", "8.0")
    monkeypatch.setenv("SF_TIMEOUT_SECONDS", "15")
    monkeypatch.setenv("SF_SERVER_TIMEOUT", "not-a-number")
    monkeypatch.setenv("SF_BEARER_TOKEN", " token ")
    monkeypatch.setenv("SF_VERIFY_TLS", "false")
    monkeypatch.delenv("SF_CLIENT_CERT", raising=False)

    cfg = ClientConfig.from_env()
    assert cfg.endpoint == "https://mycluster:19080"
    assert cfg.api_version == "8.0"
    assert cfg.timeout_seconds == 15.0
    assert cfg.server_timeout == 60
    assert cfg.headers["Authorization"] == "Bearer token"
    assert cfg.verify is False
    assert cfg.ssl_verify() is False


def test_normalize_endpoint() -> None:
    assert normalize_endpoint("") == "http://localhost:19080"
    assert normalize_endpoint("mycluster:19080") == "https://mycluster:19080"
    assert normalize_endpoint("http://localhost:19080/") == "http://localhost:19080"


def test_ssl_verify_builds_context_when_certificate_configured(monkeypatch: pytest.MonkeyPatch) -> None:
    loaded: dict[str, str | None] = {}

    def fake_load_cert_chain(self: ssl.SSLContext, certfile: str, keyfile: str | None = None, password=None) -> None:
        loaded["certfile"] = certfile
        loaded["keyfile"] = keyfile

    monkeypatch.setattr(ssl.SSLContext, "load_cert_chain", fake_load_cert_chain)

    cfg = ClientConfig(cert_path="/certs/admin.pem", key_path="/certs/admin.key", verify=False)
    context = cfg.ssl_verify()

    assert isinstance(context, ssl.SSLContext)
    assert context.verify_mode == ssl.CERT_NONE
    assert loaded == {"certfile": "/certs/admin.pem", "keyfile": "/certs/admin.key"}
