"""Configuration for inkwell."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Config:
    """Application configuration."""

    data_dir: Path = field(default_factory=lambda: Path.home() / ".local" / "share" / "inkwell")
    port: int = 8080
    host: str = "127.0.0.1"
    site_title: str = "inkwell"
    search_limit: int = 50
    snippet_tokens: int = 64
    home_article_count: int = 5

    @property
    def db_path(self) -> Path:
        return self.data_dir / "website.db"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> Config:
        """Build a config from ``PORT`` and ``INKWELL_DATA_DIR``."""
        env = os.environ if environ is None else environ
        defaults = cls()
        data_dir = env.get("INKWELL_DATA_DIR")
        port = env.get("PORT")
        return cls(
            data_dir=Path(data_dir).expanduser() if data_dir else defaults.data_dir,
            port=int(port) if port else defaults.port,
        )
