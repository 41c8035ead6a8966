"""Configuration helpers for the Service Fabric client."""

from __future__ import annotations

import json
import os
import ssl
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_ENDPOINT = "http://localhost:19080"
DEFAULT_API_VERSION = "6.0"
DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_SERVER_TIMEOUT = 60


@dataclass(slots=True)
class ClientConfig:
    """Connection settings for one cluster.

    ``timeout_seconds`` bounds the HTTP exchange on the client side, while
    ``server_timeout`` is sent as the ``timeout`` query parameter and bounds
    how long the cluster works on the operation.
    """

    endpoint: str = DEFAULT_ENDPOINT
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    server_timeout: int = DEFAULT_SERVER_TIMEOUT
    headers: dict[str, str] = field(default_factory=dict)
    cert_path: str | None = None
    key_path: str | None = None
    verify: bool = True

    def __post_init__(self) -> None:
        self.endpoint = normalize_endpoint(self.endpoint)

    def ssl_verify(self) -> bool | ssl.SSLContext:
        """Build the ``verify`` argument for httpx, including the client certificate."""
        if self.cert_path is None:
            return self.verify

        context = ssl.create_default_context()
        if not self.verify:
            # Clusters are commonly fronted by self-signed certificates.
            context.check_hostname = False
            context.verify_mode = ssl.CERT_NONE
        context.load_cert_chain(certfile=self.cert_path, keyfile=self.key_path)
        return context

    @classmethod
    def from_env(cls) -> "ClientConfig":
        endpoint = _trim_or_default(os.getenv("SF_CLUSTER_ENDPOINT"), DEFAULT_ENDPOINT)
        api_version = _trim_or_default(os.getenv("SF_API_VERSION"), DEFAULT_API_VERSION)
        timeout = _parse_positive_int(os.getenv("SF_TIMEOUT_SECONDS"))
        server_timeout = _parse_positive_int(os.getenv("SF_SERVER_TIMEOUT"))

        headers: dict[str, str] = {}
        bearer = _trim_or_none(os.getenv("SF_BEARER_TOKEN"))
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"

        return cls(
            endpoint=endpoint,
            api_version=api_version,
            timeout_seconds=float(timeout) if timeout else DEFAULT_TIMEOUT_SECONDS,
            server_timeout=server_timeout or DEFAULT_SERVER_TIMEOUT,
            headers=headers,
            cert_path=_trim_or_none(os.getenv("SF_CLIENT_CERT")),
            key_path=_trim_or_none(os.getenv("SF_CLIENT_KEY")),
            verify=_parse_bool(os.getenv("SF_VERIFY_TLS"), default=True),
        )

    @classmethod
    def from_profile(
        cls,
        cluster: str | None = None,
        *,
        config_path: str | Path | None = None,
    ) -> "ClientConfig":
        payload = load_cluster_profiles(config_path=config_path)
        clusters = payload.get("clusters")
        current = payload.get("currentCluster")

        selected_name = _trim_or_none(cluster) or _trim_or_none(current) or "local"
        entry: dict[str, Any] = {}
        if isinstance(clusters, dict) and isinstance(clusters.get(selected_name), dict):
            entry = dict(clusters[selected_name])
        elif isinstance(clusters, dict) and isinstance(clusters.get("local"), dict):
            entry = dict(clusters["local"])

        timeout_ms = _parse_positive_int(entry.get("timeoutMs"))
        server_timeout = _parse_positive_int(entry.get("serverTimeout"))

        headers: dict[str, str] = {}
        raw_headers = entry.get("headers")
        if isinstance(raw_headers, dict):
            for key, value in raw_headers.items():
                if isinstance(key, str) and isinstance(value, str) and key.strip() and value.strip():
                    headers[key] = value

        auth = entry.get("auth")
        if isinstance(auth, dict):
            bearer = _trim_or_none(auth.get("bearer"))
            if bearer:
                headers["Authorization"] = f"Bearer {bearer}"

        cert_path: str | None = None
        key_path: str | None = None
        certificate = entry.get("certificate")
        if isinstance(certificate, dict):
            cert_path = _trim_or_none(certificate.get("certPath"))
            key_path = _trim_or_none(certificate.get("keyPath"))

        verify = entry.get("verify")
        return cls(
            endpoint=_trim_or_default(entry.get("endpoint"), DEFAULT_ENDPOINT),
            api_version=_trim_or_default(entry.get("apiVersion"), DEFAULT_API_VERSION),
            timeout_seconds=(timeout_ms / 1000.0) if timeout_ms else DEFAULT_TIMEOUT_SECONDS,
            server_timeout=server_timeout or DEFAULT_SERVER_TIMEOUT,
            headers=headers,
            cert_path=cert_path,
            key_path=key_path,
            verify=verify if isinstance(verify, bool) else True,
        )


def normalize_endpoint(value: str | None) -> str:
    trimmed = (value or "").strip().rstrip("/")
    if not trimmed:
        return DEFAULT_ENDPOINT
    if "://" not in trimmed:
        return f"https://{trimmed}"
    return trimmed


def default_profiles_path() -> Path:
    xdg = os.getenv("XDG_CONFIG_HOME")
    root = Path(xdg) if xdg else Path.home() / ".config"
    return root / "servicefabric" / "clusters.json"


def load_cluster_profiles(*, config_path: str | Path | None = None) -> dict[str, Any]:
    path = Path(config_path) if config_path else default_profiles_path()
    if not path.exists():
        return {"currentCluster": "local", "clusters": {}}

    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError):
        return {"currentCluster": "local", "clusters": {}}

    if not isinstance(parsed, dict):
        return {"currentCluster": "local", "clusters": {}}
    return parsed


def _trim_or_none(value: Any) -> str | None:
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed if trimmed else None


def _trim_or_default(value: Any, fallback: str) -> str:
    if not isinstance(value, str):
        return fallback
    trimmed = value.strip()
    return trimmed if trimmed else fallback


def _parse_positive_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str):
        try:
            parsed = int(value)
        except ValueError:
            return None
        return parsed if parsed > 0 else None
    return None


def _parse_bool(value: str | None, *, default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}
