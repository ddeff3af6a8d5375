import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .db import init_db
from .exceptions import ChefbookError, StorageError
from .routers import routers

logging.basicConfig(
    level=os.getenv("CHEFBOOK_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize DB once at startup
    init_db()
    logger.info("Chefbook API ready")
    yield


app = FastAPI(title="Chefbook", lifespan=lifespan)

# Allow CORS for API clients (narrow CHEFBOOK_CORS_ORIGINS in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CHEFBOOK_CORS_ORIGINS", "*").split(","),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in routers:
    app.include_router(router)


@app.exception_handler(ChefbookError)
def chefbook_error_handler(request: Request, exc: ChefbookError):
    if isinstance(exc, StorageError):
        # details stay in the log, clients only learn that storage failed
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": "Storage failure", "code": exc.code},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, **exc.as_dict()},
    )
