"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from max_protein.adapters.usda_abbrev import (
    AbbrevFileRepository,
    HttpxAbbrevDownloader,
)
from max_protein.config import Settings
from max_protein.services.catalog import CatalogService
from max_protein.services.planner import PlannerService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_service: CatalogService
    planner_service: PlannerService
    downloader: HttpxAbbrevDownloader | None
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    repository = AbbrevFileRepository(Path(resolved_settings.usda_abbrev_path))
    catalog_service = CatalogService(repository)
    planner_service = PlannerService(
        catalog_service=catalog_service,
        greedy_max_foods=resolved_settings.greedy_max_foods,
        exhaustive_max_foods=resolved_settings.exhaustive_max_foods,
    )
    downloader = (
        HttpxAbbrevDownloader.create() if resolved_settings.usda_abbrev_url else None
    )

    async def close_resources() -> None:
        if downloader is not None:
            await downloader.close()

    return AppContainer(
        settings=resolved_settings,
        catalog_service=catalog_service,
        planner_service=planner_service,
        downloader=downloader,
        close_resources=close_resources,
    )
