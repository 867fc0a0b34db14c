"""
Process configuration, read once at start-up from the environment (.env supported).
"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TIMEOUT = 10.0


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ("*",)
    return tuple(origin.strip() for origin in raw.split(",") if origin.strip())


@dataclass(frozen=True)
class Settings:
    supabase_url: str | None = None
    supabase_key: str | None = None
    supabase_timeout: float = DEFAULT_TIMEOUT

    careers_collection: str = "careers"
    skills_collection: str = "skills"

    log_level: str = "INFO"
    cors_allow_origins: tuple[str, ...] = ("*",)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()

        timeout = os.getenv("SUPABASE_TIMEOUT")
        return cls(
            supabase_url=os.getenv("SUPABASE_URL"),
            supabase_key=os.getenv("SUPABASE_SECRET_KEY"),
            supabase_timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
            careers_collection=os.getenv("CAREERS_COLLECTION", "careers"),
            skills_collection=os.getenv("SKILLS_COLLECTION", "skills"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            cors_allow_origins=_split_origins(os.getenv("CORS_ALLOW_ORIGINS")),
        )

    def require_supabase(self) -> tuple[str, str]:
        """Return (url, key) or fail start-up when either is missing."""
        if not self.supabase_url or not self.supabase_key:
            raise RuntimeError("SUPABASE_URL and SUPABASE_SECRET_KEY must be set")
        return self.supabase_url.rstrip("/"), self.supabase_key
