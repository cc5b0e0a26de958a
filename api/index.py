from functools import lru_cache
import logging
from pathlib import Path
import sys

from fastapi import Depends, FastAPI, Response
from fastapi.responses import JSONResponse

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from shot_card.cache import ResolutionCache  # noqa: E402
from shot_card.config import Settings  # noqa: E402
from shot_card.core import accent_color, load_recent_coffees  # noqa: E402
from shot_card.debug import collect_debug_snapshot  # noqa: E402
from shot_card.render import render_card  # noqa: E402
from shot_card.sources import AirtableRecordSource, BaseRecordSource  # noqa: E402

app = FastAPI(title="shot-card API", version="1.0.0")
logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env(env_file=ROOT / ".env")


@lru_cache(maxsize=1)
def get_source() -> BaseRecordSource:
    settings = get_settings()
    return AirtableRecordSource(
        api_key=settings.airtable_api_key,
        base_id=settings.airtable_base_id,
        timeout_sec=settings.airtable_timeout_sec,
    )


@lru_cache(maxsize=1)
def get_cache() -> ResolutionCache:
    # One cache per process; entries live until the function instance is recycled.
    return ResolutionCache(get_source())


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get("/og-image.png")
async def og_image(
    settings: Settings = Depends(get_settings),
    source: BaseRecordSource = Depends(get_source),
    cache: ResolutionCache = Depends(get_cache),
) -> Response:
    try:
        coffees = await load_recent_coffees(source, cache, excluded=settings.excluded_baristas)
        png = render_card(
            coffees,
            accent=accent_color(),
            title=settings.card_title,
            font_path=settings.font_path,
        )
    except Exception:
        logger.exception("Error generating OG image")
        return Response(
            content="Error generating image",
            status_code=500,
            media_type="text/plain",
        )

    return Response(
        content=png,
        media_type="image/png",
        headers={"Cache-Control": settings.cache_control},
    )


@app.get("/debug-roasters.json")
async def debug_roasters(source: BaseRecordSource = Depends(get_source)) -> Response:
    try:
        snapshot = await collect_debug_snapshot(source)
    except Exception as exc:
        logger.exception("Debug error")
        return JSONResponse(status_code=500, content={"error": str(exc)})
    return Response(content=snapshot.model_dump_json(indent=2), media_type="application/json")
