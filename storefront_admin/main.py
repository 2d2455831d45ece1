import logging
import sys
from contextlib import asynccontextmanager

from starlette.middleware.base import BaseHTTPMiddleware
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from storefront_admin.api.v1 import blogs, dashboard, pages, products, settings as settings_routes

# App loggers (Admin API, auth) print to stdout so they show up in the host's log stream
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logging.getLogger("storefront_admin").setLevel(logging.DEBUG)
logging.getLogger("httpx").setLevel(logging.WARNING)
from storefront_admin.config import settings
from storefront_admin.services.http_client import close_http_client, init_http_client
from prometheus_client import make_asgi_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings.validate_production_config()
    init_http_client(timeout=settings.http_timeout_seconds)
    yield
    await close_http_client()


limiter = Limiter(key_func=get_remote_address, default_limits=[settings.rate_limit_default])

app = FastAPI(
    title="Storefront Admin API",
    description="Embedded admin backend: products, blogs, pages, settings, balance, pricing",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=500)


def _frame_ancestors(request: Request) -> str:
    """Embedded pages may only be framed by the merchant's shop and the admin host."""
    ancestors = [f"https://{settings.shopify_admin_host}"]
    shop = (request.query_params.get("shop") or "").strip().lower()
    if shop.endswith(".myshopify.com") and "/" not in shop:
        ancestors.insert(0, f"https://{shop}")
    return "frame-ancestors " + " ".join(ancestors) + ";"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Content-Security-Policy"] = _frame_ancestors(request)
        return response


_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()] if settings.cors_origins else ["*"]
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(dashboard.router, prefix="/api/v1")
app.include_router(products.router, prefix="/api/v1")
app.include_router(blogs.router, prefix="/api/v1")
app.include_router(pages.router, prefix="/api/v1")
app.include_router(settings_routes.router, prefix="/api/v1")

metrics_app = make_asgi_app()
app.mount("/metrics", metrics_app)


@app.get("/health")
@limiter.exempt
def health(request: Request):
    return {"status": "ok"}
