"""Application configuration using Pydantic Settings."""

from pathlib import Path

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from keno_analytics.engine.combinatorics import POOL_SIZE


class AnalysisConfig(BaseModel):
    """Tunable windows and weights shared by the analyzers."""

    model_config = {"frozen": True}

    # Game shape
    pool_size: int = Field(POOL_SIZE, ge=1, le=POOL_SIZE)
    draw_size: int = Field(20, ge=1)

    # Windows
    trend_window: int = Field(10, ge=1)
    hot_cold_window: int = Field(20, ge=1)
    recent_weight: float = Field(2.0, ge=0)

    # Prediction weights (recent trends / gap analysis / hot-cold)
    trend_weight: float = Field(0.4, ge=0)
    gap_weight: float = Field(0.3, ge=0)
    hot_cold_weight: float = Field(0.3, ge=0)
    top_k: int = Field(10, ge=1)

    # Combination analysis
    combo_min_size: int = Field(3, ge=2)
    combo_max_size: int = Field(5, ge=2)
    combination_history_limit: int = Field(500, ge=1)

    hot_count: int = Field(5, ge=1)

    @model_validator(mode="after")
    def _check_consistency(self) -> "AnalysisConfig":
        if self.draw_size > self.pool_size:
            raise ValueError("draw_size cannot exceed pool_size")
        total = self.trend_weight + self.gap_weight + self.hot_cold_weight
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"prediction weights must sum to 1.0, got {total}")
        if self.combo_min_size > self.combo_max_size:
            raise ValueError("combo_min_size cannot exceed combo_max_size")
        if self.combo_max_size > self.draw_size:
            raise ValueError("combo_max_size cannot exceed draw_size")
        return self


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Keno Draw Analytics"
    APP_ENV: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Path = Path("logs/app.log")

    # Data snapshots
    DATA_DIR: Path = Path("./data")
    PAYOUT_FILE: str = "payoutData.json"
    LOCATIONS: list[str] = ["omaha", "lincoln", "fremont", "norfolk", "blair", "beatrice"]

    # Analysis
    ANALYSIS: AnalysisConfig = AnalysisConfig()


settings = Settings()
