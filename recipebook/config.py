import os

from pydantic import BaseModel


_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    database_url: str = "sqlite:///./recipes.db"
    seed_sample_data: bool = True
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from RECIPEBOOK_* environment variables."""
        defaults = cls()
        seed = os.environ.get("RECIPEBOOK_SEED")
        return cls(
            database_url=os.environ.get(
                "RECIPEBOOK_DATABASE_URL", defaults.database_url
            ),
            seed_sample_data=(
                defaults.seed_sample_data
                if seed is None
                else seed.strip().lower() not in _FALSE_VALUES
            ),
            host=os.environ.get("RECIPEBOOK_HOST", defaults.host),
            port=int(os.environ.get("RECIPEBOOK_PORT", defaults.port)),
            log_level=os.environ.get("RECIPEBOOK_LOG_LEVEL", defaults.log_level),
        )
