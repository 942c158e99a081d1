from typing import List, Optional, Literal
from pydantic import Field, BaseModel
from pydantic_settings import BaseSettings

class DjangoSettings(BaseModel):
    debug: bool = False
    secret_key: str = "insecure-default-key-for-dev"
    allowed_hosts: List[str] = ["*"]
    database_type: Literal["sqlite", "postgres"] = "sqlite"

class PostgresSettings(BaseModel):
    host: str = "localhost"
    port: int = 5432
    name: str = "dealerdesk"
    user: str = "dealerdesk"
    password: str = ""

class ArimaDefaults(BaseModel):
    p: int = 1
    d: int = 1
    q: int = 0

class ForecastingSettings(BaseModel):
    history_months: int = Field(default=24, gt=0)
    horizon: int = Field(default=6, gt=0)
    max_history_months: int = Field(default=120, gt=0)
    max_horizon: int = Field(default=36, gt=0)
    seed: Optional[int] = Field(default=None, ge=0)
    arima: ArimaDefaults = Field(default_factory=ArimaDefaults)

class AppConfig(BaseSettings):
    django: DjangoSettings = Field(default_factory=DjangoSettings)
    postgres: PostgresSettings = Field(default_factory=PostgresSettings)
    forecasting: ForecastingSettings = Field(default_factory=ForecastingSettings)

    model_config = {
        "case_sensitive": False,
        "env_file": ".env",
        "extra": "ignore"
    }
