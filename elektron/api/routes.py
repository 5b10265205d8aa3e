from __future__ import annotations

import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

import httpx
from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

from elektron.config.settings import PACKAGE_DIR, settings
from elektron.fonts import FONT_CACHE_CONTROL, FontError, font_error_status, load_font
from elektron.providers.base import PriceProvider
from elektron.providers.errors import UpstreamError
from elektron.providers.hvakosterstrommen_adapter import HvakosterstrommenAdapter
from elektron.schemas.price import ChartPoint
from elektron.services.price_service import PriceService

logger = logging.getLogger(__name__)
router = APIRouter()

INDEX_HTML = (PACKAGE_DIR / "static" / "index.html").read_text(encoding="utf-8")


def get_price_service(request: Request) -> PriceService:
    return request.app.state.price_service


def get_font_dir(request: Request) -> Path:
    return request.app.state.font_dir


def create_app(provider: PriceProvider | None = None, font_dir: Path | None = None) -> FastAPI:
    """
    Build the application.

    Without a `provider` a shared httpx client is opened on startup and
    closed on shutdown, and prices come from hvakosterstrommen.no.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if provider is not None:
            yield
            return

        async with httpx.AsyncClient() as client:
            app.state.price_service = PriceService(HvakosterstrommenAdapter(client))
            yield

    app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
    app.state.font_dir = font_dir or settings.font_dir
    if provider is not None:
        app.state.price_service = PriceService(provider)

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        request_id = request.headers.get("x-request-id", str(uuid.uuid4()))
        response = None
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            latency_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                "request_complete",
                extra={
                    "request_id": request_id,
                    "path": request.url.path,
                    "status_code": response.status_code if response else None,
                    "latency_ms": latency_ms,
                },
            )

    app.include_router(router)
    return app


@router.get("/", response_class=HTMLResponse)
async def index():
    return HTMLResponse(INDEX_HTML)


@router.get("/health")
async def health():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/prices", response_model=list[ChartPoint])
async def prices(service: PriceService = Depends(get_price_service)):
    try:
        return await service.get_today()
    except UpstreamError as exc:
        return PlainTextResponse(f"Error: {exc}", status_code=500)


@router.get("/fonts/{filename:path}")
async def serve_font(filename: str, font_dir: Path = Depends(get_font_dir)):
    try:
        font = await load_font(font_dir, filename)
    except FontError as exc:
        logger.warning(f"Font request rejected: {exc}", extra={"font_name": filename})
        return Response(status_code=font_error_status(exc))

    return Response(
        content=font.content,
        media_type=font.media_type,
        headers={"Cache-Control": FONT_CACHE_CONTROL},
    )
