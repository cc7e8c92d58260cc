"""
FastAPI application entry point.

Digital Profile API - demographic, economic, educational and physical
statistics of a rural municipality, served as typed read procedures with
admin-only mutations.
"""
import logging

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text

from digital_profile.config import settings, ensure_directories, configure_logging
from digital_profile.database import init_db, engine
from digital_profile.exceptions import BadRequestError, ProfileError
from digital_profile.schemas.common import HealthResponse
from digital_profile.routers import (
    demographics,
    economics,
    education,
    fertility,
    municipality,
    physical,
)
from digital_profile.utils.constants import (
    CASTE_TYPES,
    RELIGION_TYPES,
    OCCUPATION_TYPES,
    FACILITY_TYPES,
    DISABILITY_TYPES,
    LANGUAGE_TYPES,
    DELIVERY_PLACE_TYPES,
)

configure_logging()
logger = logging.getLogger(__name__)

PROFILE_PREFIX = f"{settings.API_PREFIX}/profile"

# Create FastAPI application
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description=f"""
    **{settings.MUNICIPALITY_NAME_ENGLISH} Digital Profile API**

    Statistics of {settings.MUNICIPALITY_NAME} grouped into profile areas.

    ## Areas

    * **Demographics**: caste, age, religion, mother tongue, birthplace, occupation, household heads, disability
    * **Economics**: agriculture firms, foreign employment, staff registers
    * **Education**: ward-wise formal education
    * **Fertility**: place of delivery by ward
    * **Municipality introduction**: slope, aspect and settlements
    * **Physical**: household facilities

    Read endpoints are public. Create, update and delete require a
    superadmin identity forwarded by the authenticating proxy.
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Startup event
@app.on_event("startup")
async def startup_event():
    """Initialize application on startup."""
    ensure_directories()

    try:
        init_db()
        logger.info("Database initialized successfully")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")


# Include routers with prefixes
app.include_router(
    demographics.router,
    prefix=f"{PROFILE_PREFIX}/demographics",
    tags=["Demographics"]
)
app.include_router(
    economics.router,
    prefix=f"{PROFILE_PREFIX}/economics",
    tags=["Economics"]
)
app.include_router(
    education.router,
    prefix=f"{PROFILE_PREFIX}/education",
    tags=["Education"]
)
app.include_router(
    fertility.router,
    prefix=f"{PROFILE_PREFIX}/fertility",
    tags=["Fertility"]
)
app.include_router(
    municipality.router,
    prefix=f"{PROFILE_PREFIX}/municipality-introduction",
    tags=["Municipality Introduction"]
)
app.include_router(
    physical.router,
    prefix=f"{PROFILE_PREFIX}/physical",
    tags=["Physical"]
)


# Root endpoint
@app.get("/", tags=["Root"])
def root():
    """API root endpoint with basic information."""
    return {
        "message": settings.PROJECT_NAME,
        "municipality": settings.MUNICIPALITY_NAME,
        "municipality_english": settings.MUNICIPALITY_NAME_ENGLISH,
        "version": settings.VERSION,
        "docs": "/docs",
        "redoc": "/redoc",
        "endpoints": {
            "demographics": f"{PROFILE_PREFIX}/demographics",
            "economics": f"{PROFILE_PREFIX}/economics",
            "education": f"{PROFILE_PREFIX}/education",
            "fertility": f"{PROFILE_PREFIX}/fertility",
            "municipality_introduction": f"{PROFILE_PREFIX}/municipality-introduction",
            "physical": f"{PROFILE_PREFIX}/physical",
            "options": f"{PROFILE_PREFIX}/options",
            "health": f"{settings.API_PREFIX}/health",
        }
    }


# Health check
@app.get(f"{settings.API_PREFIX}/health", response_model=HealthResponse, tags=["Health"])
def health_check():
    """Health check endpoint."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "version": settings.VERSION,
        "database": db_status
    }


# Categorical options for admin forms
@app.get(f"{PROFILE_PREFIX}/options", tags=["Metadata"])
def get_options():
    """Value/label pairs of the categorical keys."""
    def options(labels):
        return [{"value": value, "label": label} for value, label in labels.items()]

    return {
        "caste_types": options(CASTE_TYPES),
        "religion_types": options(RELIGION_TYPES),
        "occupations": options(OCCUPATION_TYPES),
        "facilities": options(FACILITY_TYPES),
        "disability_types": options(DISABILITY_TYPES),
        "language_types": options(LANGUAGE_TYPES),
        "delivery_places": options(DELIVERY_PLACE_TYPES),
    }


# Exception handlers
@app.exception_handler(ProfileError)
async def profile_error_handler(request, exc: ProfileError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={
            **BadRequestError("Invalid input").to_dict(),
            "detail": [
                {"loc": [str(part) for part in error.get("loc", [])], "msg": error.get("msg")}
                for error in exc.errors()
            ]
        }
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "code": "HTTP_ERROR",
            "status_code": exc.status_code
        }
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.exception("Unhandled error")
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc),
            "status_code": 500
        }
    )
