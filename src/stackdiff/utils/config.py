from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    display_columns: str = Field("total,min,max,mean,invocations",
                                 description="Comma separated list of columns to render")
    display_unit: str = "ms"
    display_threshold: float = Field(0.0, ge=0.0)
    color: Optional[bool] = None  # None = detect from the output stream
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_dir: Optional[str] = None

    model_config = SettingsConfigDict(
        env_prefix="STACKDIFF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

@lru_cache
def get_settings() -> Settings:
    return Settings()  # env vars automatically picked up
