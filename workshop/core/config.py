from typing import Annotated, Any, Literal
from zoneinfo import ZoneInfo

from pydantic import AnyUrl, BeforeValidator, Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Self


def parse_cors(v: Any) -> list[str] | str:
    if isinstance(v, str) and not v.startswith("["):
        return [i.strip() for i in v.split(",") if i.strip()]
    elif isinstance(v, list | str):
        return v
    raise ValueError(v)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
    )
    PROJECT_NAME: str = "Workshop Scheduler"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: Literal["local", "staging", "production"] = "local"
    FRONTEND_HOST: str = "http://localhost:5173"

    BACKEND_CORS_ORIGINS: Annotated[
        list[AnyUrl] | str, BeforeValidator(parse_cors)
    ] = []

    @computed_field  # type: ignore[prop-decorator]
    @property
    def all_cors_origins(self) -> list[str]:
        return [str(origin).rstrip("/") for origin in self.BACKEND_CORS_ORIGINS] + [
            self.FRONTEND_HOST
        ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Shop clock and business hours
    TIMEZONE: str = "UTC"
    WORK_START_HOUR: int = Field(default=10, ge=0, le=23)
    WORK_END_HOUR: int = Field(default=19, ge=1, le=24)

    # Capacity policy
    SHOP_CAPACITY: int = Field(default=6, ge=1)
    MAX_JOBS_PER_TECHNICIAN: int = Field(default=3, ge=1)
    MAX_TECHNICIANS_PER_BAY: int = Field(default=3, ge=1)
    MAX_TECHNICIANS_PER_ORDER: int = Field(default=3, ge=1)
    HOURS_PER_TECHNICIAN: float = Field(default=2.0, gt=0)
    BAY_LOAD_CEILING: int = Field(default=90, ge=1, le=100)
    BAY_LOAD_STEP: int = Field(default=50, ge=1, le=100)

    # Billing and stock
    HOURLY_RATE: float = Field(default=250.0, ge=0)
    SERVICE_ID_PREFIX: str = Field(default="VOL", min_length=1, max_length=10)
    RESTOCK_QUANTITY: int = Field(default=5, ge=1)

    # Demo data
    SEED_DEMO_DATA: bool = True
    SEED: int = 42

    @model_validator(mode="after")
    def _check_work_window(self) -> Self:
        if self.WORK_START_HOUR >= self.WORK_END_HOUR:
            raise ValueError("WORK_START_HOUR must be before WORK_END_HOUR")
        return self

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.TIMEZONE)


settings = Settings()  # type: ignore
