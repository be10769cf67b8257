from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from app import config
from app.middleware.request_logging import RequestLoggingMiddleware
from app.routes import auth, dashboard, navigation, posts
from app.services.errors import StoreError

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("app")

app = FastAPI(
    redirect_slashes=False,
    title="Stories API",
    description="Blog posts backed by Supabase",
    version="1.0.0",
    debug=config.DEBUG,
    openapi_tags=[
        {
            "name": "Posts",
            "description": "Public feed, permalinks and author post management",
        },
    ],
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[config.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Redirect-To"],
)
app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=503,
        content={"detail": "Something went wrong. Please try again later."},
    )


@app.get("/health")
def health():
    return {"status": "ok"}


# Include routers
app.include_router(posts.router, prefix="/posts", tags=["Posts"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Posts"])
app.include_router(auth.router, prefix="/auth")
app.include_router(navigation.router, prefix="/nav")
