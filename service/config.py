"""
Centralised configuration loaded from environment variables.

All settings live here — never scattered across modules.
Store credentials come from the deployment (.env or environment), never code.
"""

from pydantic import SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    db_host: str = "localhost"
    db_port: int = 1433
    db_name: str = "CA_UIM"
    db_user: str = ""
    db_password: SecretStr = SecretStr("")
    log_level: str = "INFO"

    class Config:
        env_file = ".env"

    @property
    def db_server(self) -> str:
        """host:port, as shown in diagnostics."""
        return f"{self.db_host}:{self.db_port}"


# Single shared instance — import this everywhere
settings = Settings()
