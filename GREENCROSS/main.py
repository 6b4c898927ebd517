# file: GREENCROSS/main.py

# Standard library
import logging

# FastAPI core + responses
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Third-party
from slowapi.errors import RateLimitExceeded

# ------------------------------
# Routers
# ------------------------------
from GREENCROSS.Catalog.catalog import router as catalog_router
from GREENCROSS.Locations.directory import router as locations_router
from GREENCROSS.Preorder.preorder import router as preorder_router
from GREENCROSS.core.config import CORS_ALLOW_ORIGINS
from GREENCROSS.core.rate_limit import limiter

# Logging setup
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("main")

# App initialization
app = FastAPI(title="GreenCross Storefront API")

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=False,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Rate limiter
app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    # window length of the exceeded limit, e.g. 60 for "10/minute"
    retry_after = exc.limit.limit.get_expiry()
    logger.warning("Rate limit hit path=%s limit=%s", request.url.path, exc.detail)
    response = JSONResponse(
        status_code=429,
        content={
            "ok": False,
            "detail": "Too many requests. Please slow down.",
            "limit": str(exc.detail),
            "retry_after_seconds": retry_after,
        },
    )
    response.headers["Retry-After"] = str(retry_after)
    return response


# Routers
app.include_router(catalog_router)
app.include_router(locations_router)
app.include_router(preorder_router)


@app.get("/health")
async def health():
    return {"ok": True}
