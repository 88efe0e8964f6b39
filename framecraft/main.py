from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

from .config import settings
from .database import engine, Base
from .routers import pricing, orders

logger = logging.getLogger("framecraft")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)


BASE_REVISION = "3c1f9a2b7d40"
ALEMBIC_INI = os.path.join(os.path.dirname(__file__), "..", "alembic.ini")


def _alembic_config():
    """Alembic config pointed at settings.DATABASE_URL, or None without alembic.ini."""
    from alembic.config import Config

    if not os.path.exists(ALEMBIC_INI):
        return None
    cfg = Config(ALEMBIC_INI)
    cfg.set_main_option("sqlalchemy.url", settings.DATABASE_URL)
    return cfg


def _run_migrations():
    """
    Bring the schema to head on startup.

    A database whose price_structure table came from create_all() has no
    alembic_version yet; it is stamped at the base revision before upgrading.
    Failures are logged and startup continues.
    """
    from alembic import command
    from sqlalchemy import inspect

    try:
        cfg = _alembic_config()
        if cfg is None:
            logger.info("alembic.ini not found, skipping migrations")
            return

        tables = set(inspect(engine).get_table_names())
        if "alembic_version" not in tables and "price_structure" in tables:
            logger.info("Stamping %s on pre-migration database", BASE_REVISION)
            command.stamp(cfg, BASE_REVISION)

        command.upgrade(cfg, "head")
        logger.info("Schema at head")
    except Exception as e:
        logger.warning("Migration failed, continuing with current schema: %s", e)


app = FastAPI(
    title="FrameCraft Pricing",
    description=f"Custom framing quote engine for {settings.SHOP_NAME}",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pricing.router, prefix="/api")
app.include_router(orders.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "framecraft-pricing"}


@app.on_event("startup")
def auto_migrate():
    """Run pending Alembic migrations on startup."""
    _run_migrations()


@app.on_event("startup")
def auto_seed():
    """Seed the default catalog on first run."""
    if not settings.SEED_CATALOG_ON_STARTUP:
        return
    from .database import SessionLocal
    from .catalog import seed_catalog
    db = SessionLocal()
    try:
        seed_catalog(db)
    finally:
        db.close()
