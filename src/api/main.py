import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import get_product_repo, get_rules, get_settings
from src.api.errors import register_error_handlers
from src.api.openapi import apply_operation_docs
from src.app_shell.config import ConfigError, configure_logging, validate_ops_rules

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules and validate on startup (fail-fast)
    try:
        rules = get_rules()
        validate_ops_rules(rules.ops)
    except (FileNotFoundError, ValueError, ConfigError) as e:
        print(f"CRITICAL: Rules load failed: {e}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level or rules.ops.log_level)
    logger.info("Rules loaded from %s", settings.rules_path)

    undocumented = apply_operation_docs(app, rules.api)
    if undocumented:
        logger.warning("Operations without documentation: %s", ", ".join(undocumented))

    repo = get_product_repo()
    logger.info("Product catalog seeded with %d product(s)", repo.count())

    yield
    # Shutdown cleanup if needed


app = FastAPI(
    title="Product Catalog API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

register_error_handlers(app)

# --- Routers ---
from src.api.routes import investment, products  # noqa: E402

app.include_router(products.router, prefix=API_PREFIX, tags=["Products"])
app.include_router(investment.router, prefix=API_PREFIX, tags=["Investment"])


# CORS (Allow Frontend)
origins = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", include_in_schema=False)
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
