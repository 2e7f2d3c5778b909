import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Settings
from database import Database
from errors import ServiceError
from models import file_model, user_model  # noqa: F401  registers the tables
from routers import auth, file
from services.disk_storage import DiskStorage
from services.upload_namer import UploadNamer

settings = Settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the store handle and the upload directory, close the handle on shutdown."""
    config = Settings()
    database = Database(config.database_url)
    database.create_all()

    app.state.settings = config
    app.state.database = database
    app.state.storage = DiskStorage(config.storage_dir)
    app.state.namer = UploadNamer()
    logger.info("Storing uploads in %s", app.state.storage.directory)

    yield

    database.close()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, tags=["Auth"])
app.include_router(file.router, tags=["Files"])


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"detail": str(exc)})


@app.get("/")
def read_root():
    return "Server is running"


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
