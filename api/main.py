import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from codes import router as codes_router
from core import settings
from core.db import Database
from core.errors import GENERIC_ERROR_MESSAGE, ServiceError
from core.feed import CrimeFeed
from incidents import router as incidents_router
from ingestion import router as ingestion_router
from neighborhoods import router as neighborhoods_router

logging.basicConfig(level=settings.log_level())

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One shared connection per process; an open failure does not stop startup.
    db = Database(settings.database_path())
    await db.open()
    app.state.db = db
    app.state.feed = CrimeFeed(settings.feed_url())
    try:
        yield
    finally:
        await db.close()


app = FastAPI(lifespan=lifespan)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(codes_router.router, tags=["codes"])
app.include_router(neighborhoods_router.router, tags=["neighborhoods"])
app.include_router(incidents_router.router, tags=["incidents"])
app.include_router(ingestion_router.router, tags=["ingestion"])


@app.exception_handler(ServiceError)
@app.exception_handler(RequestValidationError)
@app.exception_handler(Exception)
async def internal_error(request: Request, exc: Exception) -> PlainTextResponse:
    # Callers never see the detail; it only goes to the log.
    logger.error(
        "request_failed method=%s path=%s error=%s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return PlainTextResponse(GENERIC_ERROR_MESSAGE, status_code=500)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "stpaul crime api"}


if __name__ == "__main__":
    import uvicorn

    logger.info("Now listening on port %s", settings.port())
    uvicorn.run(app, host="0.0.0.0", port=settings.port())
