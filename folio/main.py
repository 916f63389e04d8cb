import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from folio.routers import images, posts
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.posts_path.is_dir():
        logger.warning(f"Posts directory does not exist: {settings.posts_path}")
    else:
        logger.info(f"Serving posts from {settings.posts_path}")
    yield


app = FastAPI(
    title="Folio API",
    description="Blog posts and portfolio content",
    lifespan=lifespan,
)

app.include_router(images.router)
app.include_router(posts.router)


@app.get("/")
async def root():
    return {"message": "Folio API is running"}
