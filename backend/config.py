"""Centralized configuration — all env vars in one place."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

API_KEY_PLACEHOLDER = "YOUR_RAWG_API_KEY_HERE"

_DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "public"


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.rawg_api_key: str | None = os.getenv("RAWG_API_KEY")
        self.rawg_base_url: str = os.getenv("RAWG_BASE_URL", "https://api.rawg.io/api")

        self.host: str = os.getenv("HOST", "0.0.0.0")
        self.port: str = os.getenv("PORT", "3000")
        self.cache_ttl_seconds: str = os.getenv("CACHE_TTL_SECONDS", "600")
        self.upstream_timeout_seconds: str = os.getenv("UPSTREAM_TIMEOUT_SECONDS", "10")

        self.cors_origins: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
        self.git_sha: str = os.getenv("GIT_SHA", "unknown")
        self.environment: str = os.getenv("ENVIRONMENT", "local")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
        self.static_dir: Path = Path(os.getenv("STATIC_DIR", str(_DEFAULT_STATIC_DIR)))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def listen_port(self) -> int:
        return int(self.port)

    @property
    def cache_ttl(self) -> float:
        return float(self.cache_ttl_seconds)

    @property
    def upstream_timeout(self) -> float:
        return float(self.upstream_timeout_seconds)

    def validate(self) -> list[str]:
        """Return a list of configuration problems. Empty means ready to serve."""
        problems = []
        if not self.rawg_api_key or self.rawg_api_key == API_KEY_PLACEHOLDER:
            problems.append("RAWG_API_KEY is not set (add RAWG_API_KEY=your_actual_key_here to .env)")

        numeric = {
            "PORT": (self.port, int),
            "CACHE_TTL_SECONDS": (self.cache_ttl_seconds, float),
            "UPSTREAM_TIMEOUT_SECONDS": (self.upstream_timeout_seconds, float),
        }
        for var, (raw, cast) in numeric.items():
            try:
                value = cast(raw)
            except ValueError:
                problems.append(f"{var} must be a number, got {raw!r}")
                continue
            if value <= 0:
                problems.append(f"{var} must be positive, got {raw!r}")
        return problems


settings = Settings()
