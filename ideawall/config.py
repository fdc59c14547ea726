from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path

_PROJECT_ROOT = Path(__file__).resolve().parent.parent

def _env_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    return Path(value) if value else default

@dataclass(frozen=True)
class Settings:
    APP_TITLE: str = "Idea Wall"
    DB_PATH: Path = field(default_factory=lambda: _env_path("IDEAWALL_DB_PATH", _PROJECT_ROOT / "ideas.db"))
    LOG_LEVEL: str = field(default_factory=lambda: os.environ.get("IDEAWALL_LOG_LEVEL", "INFO").upper())
    TEMPLATES_DIR: Path = Path(__file__).resolve().parent / "web" / "templates"

settings = Settings()
