from pydantic import ConfigDict, field_validator
from pydantic_settings import BaseSettings

# Flag values that switch an option on; anything else leaves it off
TRUTHY_FLAG_VALUES = {"1", "true", "yes"}


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", env_prefix="", extra="ignore")

    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    log_level: str = "INFO"

    # Skip certificate checks on outbound https fetches (self-signed proxy chains)
    allow_insecure_tls: bool = False

    output_dir: str = "docs"

    fetch_timeout_seconds: float = 30.0
    max_redirects: int = 20

    @field_validator("allow_insecure_tls", "debug", mode="before")
    @classmethod
    def parse_flag(cls, v):
        if isinstance(v, bool):
            return v
        if v is None:
            return False
        return str(v).strip().lower() in TRUTHY_FLAG_VALUES


def get_settings() -> Settings:
    return Settings()
