from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from datetime import datetime, timezone
import logging

from string_analyzer import config
from string_analyzer.api.routes import router
from string_analyzer.database import init_store
from string_analyzer.exceptions import StringAnalyzerError

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

ENDPOINTS = {
    "POST /strings": "Analyze and store a string",
    "GET /strings": "Get all strings with optional filters",
    "GET /strings/{string_value}": "Get specific string analysis",
    "GET /strings/filter-by-natural-language": "Filter using natural language",
    "DELETE /strings/{string_value}": "Delete a string",
}

# Create FastAPI app
app = FastAPI(
    title=config.APP_NAME,
    description="Analyze strings, store their properties and filter them",
    version=config.APP_VERSION
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_methods=config.CORS_METHODS,
    allow_headers=config.CORS_HEADERS,
)

# Initialize the store on startup
@app.on_event("startup")
def on_startup():
    logger.info("Initializing string store...")
    app.state.store = init_store()
    logger.info("Available endpoints:")
    for endpoint in ENDPOINTS:
        logger.info(f"  {endpoint}")

# Include routers
app.include_router(router, tags=["strings"])

# Root endpoint
@app.get("/")
def root():
    return {
        "message": config.APP_NAME,
        "version": config.APP_VERSION,
        "endpoints": ENDPOINTS
    }

@app.get("/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

# Core errors carry their own status code
@app.exception_handler(StringAnalyzerError)
async def string_analyzer_exception_handler(request: Request, exc: StringAnalyzerError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message}
    )

# Validation error handler
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        field = error['loc'][-1]
        message = error['msg']
        errors[field] = message

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Invalid request body or missing 'value' field",
            "details": errors
        }
    )

# HTTPException handler
@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)}
    )

# Generic error handler
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal server error"
        }
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("string_analyzer.main:app", host=config.HOST, port=config.PORT, reload=config.RELOAD)
