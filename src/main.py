# Initialization order:
# 1. Load environment variables
# 2. Validate configuration (blocking - must pass)
# 3. Build the application
import os

# STEP 1: Load environment variables
from dotenv import load_dotenv
load_dotenv()

# STEP 2: Validate configuration (BLOCKING - must pass)
from src.validators.config_validator import validate_config
validate_config()

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.config import get_config
from src.controllers import operational_controller
from src.core.errors import (
    ErrorResponse,
    error_response_handler,
    http_exception_handler,
)
from src.core.indexes import create_indexes
from src.core.logger import logger
from src.db.mongodb import close_db, get_db
from src.middlewares import CorrelationIdMiddleware
from src.routers import order_router, product_router, review_router, user_router

config = get_config()

app = FastAPI(title="Storefront Service")

app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register centralized error handlers
app.add_exception_handler(ErrorResponse, error_response_handler)
app.add_exception_handler(HTTPException, http_exception_handler)


@app.exception_handler(RequestValidationError)
def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(
        "Request validation error",
        metadata={"event": "request_validation_error", "errors": jsonable_encoder(exc.errors())}
    )
    return JSONResponse(
        status_code=422, content=jsonable_encoder({"error": "Validation error", "details": exc.errors()})
    )


@app.on_event("startup")
async def startup_event():
    """Create indexes; an unreachable database is logged, not fatal"""
    try:
        await create_indexes(await get_db())
    except Exception as error:
        logger.warning(
            "Index creation skipped, database not reachable at startup",
            metadata={"event": "startup_indexes_skipped", "error": str(error)}
        )


@app.on_event("shutdown")
async def shutdown_event():
    close_db()


app.include_router(product_router, prefix="/api/products", tags=["products"])
app.include_router(review_router, prefix="/api/reviews", tags=["reviews"])
app.include_router(order_router, prefix="/api/orders", tags=["orders"])
app.include_router(user_router, prefix="/api", tags=["users"])

# Operational endpoints for infrastructure/monitoring
app.get("/health")(operational_controller.health)
app.get("/health/ready")(operational_controller.readiness)
app.get("/health/live")(operational_controller.liveness)

if __name__ == "__main__":
    port = int(os.getenv("PORT", config.PORT))

    logger.info(
        f"Storefront service starting on port {port}",
        metadata={
            "service": {
                "name": os.getenv("SERVICE_NAME", "storefront-service"),
                "version": os.getenv("SERVICE_VERSION", "1.0.0"),
                "environment": config.ENVIRONMENT,
                "port": port,
            }
        }
    )

    uvicorn.run("src.main:app", host=config.HOST, port=port, reload=config.DEBUG)  # nosec B104
