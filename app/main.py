from fastapi import FastAPI, Request, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import uvicorn

from app.core.config import settings
from app.core.logging_config import configure_logging
from app.api import shortener
from app.db.Connection import database
from app.db.store import MappingStore

logger = configure_logging()
logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="A simple URL shortener application"
)

app.state.store = MappingStore()
logger.info("In-memory mapping store initialized.")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Registered before the shortener router so /{short_url} does not shadow it
@app.get("/health", tags=["health"])
def health_check(store: MappingStore = Depends(database.get_store)):
    return {"status": "healthy", "service": "url-shortener", "mappings": len(store)}

app.include_router(shortener.router, prefix="")

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def run():
    logger.info(f"Server is running on http://{settings.HOST}:{settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
