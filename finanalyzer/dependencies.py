"""
Factory functions wiring settings into the client and the view controller.
"""

from functools import lru_cache

from finanalyzer.clients import AnalysisApiClient
from finanalyzer.core.config import AnalyzerSettings, get_settings
from finanalyzer.core.logging import configure_logging
from finanalyzer.services import ViewController


@lru_cache()
def _settings() -> AnalyzerSettings:
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_analysis_client() -> AnalysisApiClient:
    """Provide the shared analysis service client."""
    settings = _settings()
    return AnalysisApiClient(
        base_url=settings.base_url,
        timeout_seconds=settings.request_timeout_seconds,
    )


def build_view_controller(settings: AnalyzerSettings | None = None) -> ViewController:
    """Build a fresh view controller; each one tracks its own job."""
    if settings is None:
        settings = _settings()
        client = get_analysis_client()
    else:
        client = AnalysisApiClient(
            base_url=settings.base_url,
            timeout_seconds=settings.request_timeout_seconds,
        )
    configure_logging(settings.log_level)
    return ViewController(client, poll_interval_seconds=settings.poll_interval_seconds)


__all__ = ["build_view_controller", "get_analysis_client"]
