import logging

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from tkb.config import Settings, get_settings
from tkb.errors import ConfigError, RateLimitedError, TKBError
from tkb.schema import POWER_RULE
from tkb.service import get_concept, get_instance

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger("tkb.server")

app = FastAPI(title="TKB - True Knowledge Backend")

# CORS Middleware
try:
    _origins = list(get_settings().cors_origins)
    logging.getLogger().setLevel(get_settings().log_level)
except ConfigError as e:
    # requests will answer 503 until the key is configured
    logger.warning(str(e))
    _origins = ["http://localhost:5173"]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def settings_dependency() -> Settings:
    try:
        return get_settings()
    except ConfigError as e:
        raise HTTPException(status_code=503, detail=str(e))


def _to_http(e: TKBError, settings: Settings) -> HTTPException:
    logger.warning(f"Generation failed: {type(e).__name__}: {e}")
    if isinstance(e, RateLimitedError):
        return HTTPException(status_code=429, detail=str(e), headers={"Retry-After": str(settings.retry_after)})
    return HTTPException(status_code=502, detail=str(e))


# --- Routes ---
@app.get("/")
def root():
    return {"status": "TKB backend running"}


@app.get("/algoInfo")
def algo_info():
    """Placeholder algorithm record."""
    return POWER_RULE.model_dump(by_alias=True)


@app.get("/instance")
def instance(settings: Settings = Depends(settings_dependency)):
    try:
        obj = get_instance(settings)
    except TKBError as e:
        raise _to_http(e, settings) from e
    return obj.to_wire()


@app.get("/concept")
def concept(variant: str = Query("default"), settings: Settings = Depends(settings_dependency)):
    try:
        obj = get_concept(settings, variant)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except TKBError as e:
        raise _to_http(e, settings) from e
    return obj.to_wire()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
