"""VibeCustomers FastAPI application.

Serves the Reviews domain over HTTP. Commands are processed synchronously
within the request; each request runs inside the Reviews domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset / "test" → event_processing = "sync"  (projectors fire in UoW)
#   - "production"   → event_processing = "async" (projectors fire via Engine)
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from reviews.domain import reviews  # noqa: E402
from reviews.utils.logging import add_context, clear_context

reviews.init()

_DOMAIN_PREFIXES = ("/api",)

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="VibeCustomers API",
    description="Customer reviews: submission, listings and dashboard analytics",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the Reviews domain context for API requests."""
    if request.url.path.startswith(_DOMAIN_PREFIXES):
        add_context(method=request.method, path=request.url.path)
        try:
            with reviews.domain_context():
                response = await call_next(request)
        finally:
            clear_context()
        return response
    # Health check, docs, etc.
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from reviews.api.routes import review_router  # noqa: E402

app.include_router(review_router)
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domains": {"reviews": {"name": reviews.name}}})
