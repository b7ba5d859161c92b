"""FastAPI application entry point."""
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from app.core.database import engine, Base, SessionLocal
from app.core.logging_config import logger
from app.api.v1.router import api_router
from app import crud
from app.services.exceptions import PolicyAccessError
from app.services.policy_store import PolicyStore

logger.info("Starting Policy Field Access Service")

# Create database tables
try:
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        crud.seed_counter(db, crud.TOTAL_POLICIES)
    finally:
        db.close()
    logger.info("Database tables initialized successfully")
except Exception as e:
    logger.error(f"Failed to initialize database tables: {e}")
    raise

app = FastAPI(
    title="Policy Field Access Service",
    description="Insurance policy store with per-field, per-grantee read grants",
    version="1.0.0"
)

origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PolicyAccessError)
async def policy_access_error_handler(request: Request, exc: PolicyAccessError):
    """Turns domain errors into JSON error responses; the request ends here."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.error, "detail": exc.detail},
    )


app.include_router(api_router)
logger.info("API routes registered successfully")


@app.on_event("startup")
async def startup_event():
    logger.info("Application startup complete")


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Application shutting down")


@app.get("/", tags=["Health"])
def read_root():
    """Basic health check endpoint."""
    return {"status": "Policy Field Access Service is Operational", "docs": "/docs"}


@app.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
def health_check():
    """Detailed health check endpoint with system status."""
    health_status = {
        "status": "healthy",
        "service": "Policy Field Access Service",
        "version": "1.0.0",
        "checks": {}
    }

    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        health_status["checks"]["database"] = {
            "status": "healthy",
            "message": "Database connection successful"
        }
        health_status["checks"]["policies"] = {
            "status": "healthy",
            "total_policies": PolicyStore(db).count()
        }
    except Exception as e:
        health_status["status"] = "degraded"
        health_status["checks"]["database"] = {
            "status": "unhealthy",
            "message": f"Database check failed: {str(e)}"
        }
        logger.error(f"Database health check failed: {e}")
    finally:
        db.close()

    status_code = status.HTTP_200_OK
    if health_status["status"] == "degraded":
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(content=health_status, status_code=status_code)
