"""FastAPI hosting surface for the award search proxy.

Every method on /api/query-awards is routed to the handler so that non-POST
requests get the handler's 405 body rather than FastAPI's default one.

Run locally with:
    python -m award_proxy.app
"""

import logging
import sys
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .config import Config, load_config
from .handler import handle

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)

ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


@lru_cache
def get_config() -> Config:
    config = load_config()
    logging.getLogger().setLevel(config.log_level.upper())
    return config


app = FastAPI(
    title="Award Search Proxy",
    description="Translate simplified vendor award searches into USAspending.gov queries",
    version=__version__,
)


@app.api_route("/api/query-awards", methods=ROUTE_METHODS)
async def query_awards(request: Request, config: Config = Depends(get_config)) -> JSONResponse:
    """Relay one award search to USAspending.gov."""
    body = await request.body()
    status_code, payload = await handle(request.method, body, config=config)
    return JSONResponse(status_code=status_code, content=payload)


if __name__ == "__main__":
    import uvicorn

    config = get_config()
    logger.info("Starting award search proxy on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port)
