"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from windsaloft.models.nws import ForecastHorizon


class NwsConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.weather.gov"
    user_agent: str = "windsaloft/0.1.0"
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=5.0, ge=0.0)


class ProductConfig(BaseModel):
    model_config = {"extra": "forbid"}

    horizon: ForecastHorizon = ForecastHorizon.SIX_HOUR


class WindsAloftConfig(BaseModel):
    model_config = {"extra": "forbid"}

    nws: NwsConfig = NwsConfig()
    product: ProductConfig = ProductConfig()
