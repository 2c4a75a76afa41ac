# invoicing/main.py

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from invoicing.api.auth import router as auth_router
from invoicing.api.customers import router as customers_router
from invoicing.api.dashboard import router as dashboard_router
from invoicing.api.error_handlers import register_error_handlers
from invoicing.api.invoices import router as invoices_router
from invoicing.config import get_settings
from invoicing.logging_config import setup_logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    logger.info("Invoicing dashboard API starting")
    yield


app = FastAPI(
    title="Invoicing Dashboard API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/health")
def health_check():
    return {"status": "ok"}

app.include_router(dashboard_router)
app.include_router(invoices_router)
app.include_router(customers_router)
app.include_router(auth_router)
