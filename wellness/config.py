"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional


def split_env_list(value: str | None) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


PORT = int(os.getenv("PORT", "8000"))


@dataclass(frozen=True)
class Settings:
    """Settings injected into the app, the MCP server and the webhook client."""

    sheets_webapp_url: str = ""
    sheets_timeout: float = 10.0
    log_level: str = "INFO"
    log_file: Optional[str] = None
    allowed_hosts: List[str] = field(default_factory=list)
    allowed_origins: List[str] = field(default_factory=list)
    cors_allow_origins: List[str] = field(default_factory=lambda: ["*"])

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            sheets_webapp_url=os.getenv("SHEETS_WEBAPP_URL", "").strip(),
            sheets_timeout=float(os.getenv("SHEETS_TIMEOUT_SECONDS", "10")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE") or None,
            allowed_hosts=split_env_list(os.getenv("MCP_ALLOWED_HOSTS")),
            allowed_origins=split_env_list(os.getenv("MCP_ALLOWED_ORIGINS")),
            cors_allow_origins=split_env_list(os.getenv("CORS_ALLOW_ORIGINS")) or ["*"],
        )
