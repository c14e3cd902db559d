from decimal import Decimal
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOTELREG_")

    breakfast_surcharge: Decimal = Field(default=Decimal("1.25"), ge=1)
    log_level: str = "INFO"
    scenario_path: Path = Path(__file__).resolve().parents[1] / "data/demo_scenario.yaml"


settings = Settings()
