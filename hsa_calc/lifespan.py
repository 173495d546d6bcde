from __future__ import annotations

import inspect
import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncContextManager

from fastapi import FastAPI

from hsa_calc.config import get_settings
from hsa_calc.tax.dispatch import TAX_YEAR, list_supported_provinces

Hook = Callable[[FastAPI], Awaitable[None] | None]


def _open_telemetry_sink(
    logger: logging.Logger, app_label: str, log_dir: str | None
) -> logging.Handler | None:
    if not log_dir:
        return None
    logs_dir = Path(log_dir)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.warning("Unable to create logs directory %s: %s", logs_dir, exc)
        return None
    handler = logging.FileHandler(logs_dir / f"{app_label}.log", encoding="utf-8")
    handler.setLevel(logging.INFO)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))
    logger.addHandler(handler)
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
    return handler


async def _invoke_hook(hook: Hook | None, app: FastAPI) -> None:
    if hook is None:
        return
    try:
        result = hook(app)
        if inspect.isawaitable(result):
            await result  # type: ignore[func-returns-value]
    except Exception:  # pragma: no cover - hooks are user provided
        logging.getLogger("hsa_calc").exception("Application lifecycle hook failed")


def build_application_lifespan(
    app_label: str,
    *,
    startup_hook: Hook | None = None,
    shutdown_hook: Hook | None = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    base_logger = logging.getLogger("hsa_calc")

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
        settings = get_settings()
        logger = base_logger.getChild(app_label)
        previous_level = base_logger.level
        telemetry_handler = _open_telemetry_sink(base_logger, app_label, settings.log_dir)

        app.state.settings = settings
        app.state.tax_year = TAX_YEAR
        app.state.provinces = list_supported_provinces()
        app.state.telemetry_handler = telemetry_handler

        logger.info(
            "Startup complete: tax_year=%s provinces=%s default_province=%s",
            TAX_YEAR,
            len(app.state.provinces),
            settings.default_province,
        )

        try:
            await _invoke_hook(startup_hook, app)
            yield
        finally:
            await _invoke_hook(shutdown_hook, app)
            for attr in ("settings", "tax_year", "provinces", "telemetry_handler"):
                if hasattr(app.state, attr):
                    delattr(app.state, attr)
            logger.info("Shutdown complete")
            if telemetry_handler is not None:
                base_logger.removeHandler(telemetry_handler)
                telemetry_handler.close()
                base_logger.setLevel(previous_level)

    return _lifespan
