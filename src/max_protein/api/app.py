"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, Query, Request, status
from fastapi.responses import PlainTextResponse

from max_protein.api.models import BenchmarkPayload, PlanPayload
from max_protein.app_logging import configure_logging
from max_protein.config import Settings, parse_benchmark_sizes
from max_protein.containers import AppContainer
from max_protein.domain.foods import Food
from max_protein.domain.planning import (
    Algorithm,
    BenchmarkRow,
    PlanRequest,
    PlanResult,
)
from max_protein.services.reporting import format_benchmark, format_plan


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        settings = state_container.settings
        try:
            path = Path(settings.usda_abbrev_path)
            if (
                state_container.downloader is not None
                and settings.usda_abbrev_url
                and not path.exists()
            ):
                await state_container.downloader.download(
                    settings.usda_abbrev_url, path
                )
            state_container.catalog_service.get_catalog()
        except Exception:
            logger.exception("Failed to prepare the food catalog")
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    # Selection is blocking work; plain handlers run in the threadpool.
    @app.get("/foods")
    def list_foods(
        request: Request,
        min_kcal: int | None = None,
        max_kcal: int | None = None,
        limit: int = Query(default=50, ge=0),
    ) -> dict[str, object]:
        """Return the filtered food catalog."""
        state_container: AppContainer = request.app.state.container
        settings = state_container.settings
        with _http_errors():
            catalog = state_container.catalog_service.filtered(
                settings.filter_min_kcal if min_kcal is None else min_kcal,
                settings.filter_max_kcal if max_kcal is None else max_kcal,
                limit,
            )
        return {"foods": [_serialize_food(food) for food in catalog]}

    @app.post("/plans")
    def create_plan(payload: PlanPayload, request: Request) -> dict[str, object]:
        """Select foods maximizing protein within the calorie budget."""
        state_container: AppContainer = request.app.state.container
        plan_request = _plan_request(payload, state_container.settings)
        with _http_errors():
            result = state_container.planner_service.plan(plan_request)
        return _serialize_plan(result)

    @app.post("/plans/report", response_class=PlainTextResponse)
    def plan_report(payload: PlanPayload, request: Request) -> str:
        """Return a plan as a plain-text report."""
        state_container: AppContainer = request.app.state.container
        plan_request = _plan_request(payload, state_container.settings)
        with _http_errors():
            result = state_container.planner_service.plan(plan_request)
        return format_plan(result)

    @app.post("/benchmarks")
    def run_benchmark(
        payload: BenchmarkPayload, request: Request
    ) -> dict[str, object]:
        """Time an algorithm over increasing catalog sizes."""
        rows = _benchmark(payload, request.app.state.container)
        return {"runs": [_serialize_benchmark_row(row) for row in rows]}

    @app.post("/benchmarks/report", response_class=PlainTextResponse)
    def benchmark_report(payload: BenchmarkPayload, request: Request) -> str:
        """Return benchmark timings as plain text."""
        return format_benchmark(_benchmark(payload, request.app.state.container))

    logger.info("Max protein API ready")
    return app


@contextmanager
def _http_errors() -> Iterator[None]:
    """Translate domain and catalog errors into HTTP errors."""
    try:
        yield
    except FileNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Food database not available: {exc.filename}",
        ) from exc
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc


def _or_default(value: int | None, default: int) -> int:
    return default if value is None else value


def _benchmark(
    payload: BenchmarkPayload, container: AppContainer
) -> list[BenchmarkRow]:
    settings = container.settings
    sizes = (
        payload.sizes
        if payload.sizes is not None
        else parse_benchmark_sizes(settings.benchmark_sizes)
    )
    with _http_errors():
        return container.planner_service.benchmark(
            payload.algorithm,
            sizes,
            budget_kcal=_or_default(payload.budget_kcal, settings.default_budget_kcal),
            min_kcal=_or_default(payload.min_kcal, settings.filter_min_kcal),
            max_kcal=_or_default(payload.max_kcal, settings.filter_max_kcal),
        )


def _plan_request(payload: PlanPayload, settings: Settings) -> PlanRequest:
    if payload.max_foods is not None:
        max_foods = payload.max_foods
    elif payload.algorithm is Algorithm.EXHAUSTIVE:
        max_foods = settings.exhaustive_max_foods
    else:
        max_foods = settings.greedy_max_foods
    return PlanRequest(
        algorithm=payload.algorithm,
        budget_kcal=_or_default(payload.budget_kcal, settings.default_budget_kcal),
        min_kcal=_or_default(payload.min_kcal, settings.filter_min_kcal),
        max_kcal=_or_default(payload.max_kcal, settings.filter_max_kcal),
        max_foods=max_foods,
    )


def _serialize_food(food: Food) -> dict[str, object]:
    return {
        "description": food.description,
        "amount": food.amount,
        "amount_g": food.amount_g,
        "kcal": food.kcal,
        "protein_g": food.protein_g,
    }


def _serialize_plan(result: PlanResult) -> dict[str, object]:
    totals = result.selection.totals
    return {
        "algorithm": result.request.algorithm.value,
        "budget_kcal": result.request.budget_kcal,
        "catalog_size": result.catalog_size,
        "elapsed_seconds": result.elapsed_seconds,
        "indices": list(result.selection.indices),
        "foods": [_serialize_food(food) for food in result.selection],
        "total_kcal": totals.kcal,
        "total_protein_g": totals.protein_g,
    }


def _serialize_benchmark_row(row: BenchmarkRow) -> dict[str, object]:
    return {
        "algorithm": row.algorithm.value,
        "n": row.n,
        "elapsed_seconds": row.elapsed_seconds,
        "total_kcal": row.total_kcal,
        "total_protein_g": row.total_protein_g,
    }
