from pydantic import BaseModel, ConfigDict, Field


class UpstreamRecord(BaseModel):
    """One hourly price as published by hvakosterstrommen.no."""

    model_config = ConfigDict(strict=True, allow_inf_nan=False, extra="ignore")

    nok_per_kwh: float = Field(alias="NOK_per_kWh")
    eur_per_kwh: float = Field(alias="EUR_per_kWh")
    time_start: str


class ChartPoint(BaseModel):
    hour: int
    price: float
    time: str
    price_nok: float
    price_eur: float
