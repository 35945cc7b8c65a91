import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import install_error_handlers
from src.api.routes.threads import router as threads_router
from src.config import settings

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
_src_logger = logging.getLogger("src")
if not _src_logger.handlers:
    _src_logger.addHandler(_handler)
_src_logger.setLevel(settings.log_level.upper())

app = FastAPI(
    title="Thread Generator API",
    description="Turn YouTube video transcripts into post threads",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_origin_regex=r"http://localhost:\d+",
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_error_handlers(app)

app.include_router(threads_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}
