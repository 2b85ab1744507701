"""
VRTFlow Storefront

Backend for the VRTFlow landing page: catalog, shopper carts, checkout
submission and the tenant organization registry.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.templating import Jinja2Templates

from .core.config import Settings, get_settings
from .database.catalog import catalog
from .database.organizations import OrganizationRegistry
from .routes import catalog_router, sessions_router, organizations_router
from .services.delivery_client import DeliveryClient
from .services.storefront import SessionManager

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

templates_dir = os.path.join(os.path.dirname(__file__), "templates")
templates = Jinja2Templates(directory=templates_dir)

FEATURES = [
    ("Admin Dashboard", "Jobs, staff and clients in one place with real-time updates."),
    ("Staff Portal", "Mobile-first job sheets and checklists for your team in the field."),
    ("PDF Automation", "Quotes, invoices and reports generated straight from job data."),
    ("Time Tracking", "Clock-ins, timesheets and payroll exports without spreadsheets."),
    ("Enterprise Security", "Role-based access scoped to each organization."),
]


def create_app(
    settings: Optional[Settings] = None,
    delivery_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the environment
        delivery_transport: Optional httpx transport for the delivery client
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events"""
        logger.info(f"{settings.app_name} starting up...")
        logger.info(f"Delivery endpoint: {settings.delivery_url}")

        delivery = DeliveryClient(
            delivery_url=settings.delivery_url,
            to=settings.delivery_to,
            subject=settings.delivery_subject,
            timeout=settings.delivery_timeout_seconds,
            transport=delivery_transport,
        )
        app.state.sessions = SessionManager(
            catalog=catalog,
            delivery=delivery,
            max_age_hours=settings.session_max_age_hours,
        )
        app.state.organizations = OrganizationRegistry()
        yield
        await delivery.close()
        logger.info(f"{settings.app_name} shutting down...")

    app = FastAPI(
        title=settings.app_name,
        description="Landing page backend: catalog, cart checkout and organizations",
        version="1.0.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router)
    app.include_router(sessions_router)
    app.include_router(organizations_router)

    @app.get("/")
    async def home(request: Request):
        """Landing page"""
        return templates.TemplateResponse(
            request,
            "index.html",
            {
                "title": "VRTFlow",
                "features": FEATURES,
                "items": catalog.list_items(),
            },
        )

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": "vrtflow-storefront"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "vrtflow.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
