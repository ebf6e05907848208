from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

import httpx

from ..core.constants import DEFAULT_API_TIMEOUT_SECONDS
from ..core.exceptions import ConfigurationError


@dataclass(frozen=True)
class GatewayConfig:
    base_url: str
    project_id: str
    public_key: str
    timeout: float = DEFAULT_API_TIMEOUT_SECONDS

    @classmethod
    def from_settings(cls, raw: dict) -> "GatewayConfig":
        project_id = str(raw.get("project_id") or "").strip()
        public_key = str(raw.get("public_key") or "").strip()
        base_url = str(raw.get("base_url") or "").strip().rstrip("/")
        if not project_id or not public_key:
            raise ConfigurationError("HR_PROJECT_ID and HR_PUBLIC_KEY must be set")
        if not base_url:
            raise ConfigurationError("HR_API_BASE_URL must be set")
        return cls(
            base_url=base_url,
            project_id=project_id,
            public_key=public_key,
            timeout=float(raw.get("timeout") or DEFAULT_API_TIMEOUT_SECONDS),
        )


class GatewayConnection:
    """Owns the HTTP client used to talk to the record backend.

    Note: The client is created lazily and reused for the lifetime of the app.
    Tests pass an ``httpx.MockTransport`` instead of hitting the network.
    """

    def __init__(self, config: GatewayConfig, *, transport: Optional[httpx.BaseTransport] = None):
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None
        self._lock = threading.Lock()

    @property
    def config(self) -> GatewayConfig:
        return self._config

    def table_url(self, table: str, action: str) -> str:
        return f"/projects/{self._config.project_id}/tables/{table}/{action}"

    def client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    base_url=self._config.base_url,
                    headers={
                        "X-Public-Key": self._config.public_key,
                        "Accept": "application/json",
                    },
                    timeout=self._config.timeout,
                    transport=self._transport,
                )
            return self._client

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None
