from __future__ import annotations

from app.api.router import api_router
from app.core.config import create_app
from app.core.logging import configure_logging
from app.core.settings import settings
from app.web.public.router import router as public_router

from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware


configure_logging(settings.LOG_LEVEL)
app = create_app()

# Behind Heroku/nginx: trust X-Forwarded-* so https cookies and client IPs are right
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

# JSON API
app.include_router(api_router, prefix=settings.API_PREFIX)

# Public HTML (pages by slug, sub-product detail)
app.include_router(public_router)
