"""Dependency injection for FastAPI."""

from fastapi import Request

from keno_analytics.config import AnalysisConfig, settings
from keno_analytics.ingestion.context import IngestionContext


def get_context(request: Request) -> IngestionContext:
    """The ingestion context created by the application lifespan."""
    return request.app.state.ingestion


def get_analysis_config() -> AnalysisConfig:
    return settings.ANALYSIS
