"""
config.py
----------
Sovelluksen asetukset ympäristömuuttujista (.env luetaan automaattisesti).
"""

from typing import Annotated

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

load_dotenv()

DEFAULT_PORT = 5001
DEFAULT_DATABASE_URL = "sqlite:///./feedback.db"
DEFAULT_MOUNT_PATH = "/api/feedback"


def normalize_mount_path(path: str) -> str:
    """Muotoilee polun muotoon '/a/b' (alussa kauttaviiva, lopussa ei)."""
    path = path.strip().strip("/")
    if not path:
        raise ValueError("FEEDBACK_MOUNT_PATH cannot be the root path")
    return "/" + path


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    database_url: str = DEFAULT_DATABASE_URL
    mount_path: str = Field(
        default=DEFAULT_MOUNT_PATH,
        validation_alias=AliasChoices("FEEDBACK_MOUNT_PATH", "mount_path"),
    )
    # pilkuilla eroteltu lista, ei JSON:ia
    cors_origins: Annotated[list[str], NoDecode] = ["*"]
    db_fail_fast: bool = False
    db_echo: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @field_validator("mount_path")
    @classmethod
    def validate_mount_path(cls, v: str) -> str:
        return normalize_mount_path(v)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v):
        if isinstance(v, str):
            return [o.strip() for o in v.split(",") if o.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()
