"""FastAPI front door for the log count service."""

import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from .config import settings
from .errors import InvalidRequestError
from .models import ErrorResponse, ExtractionResult, FetchLogsRequest
from .orchestrator import LogsFetchOrchestrator

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Logcount",
    description="Extracts log counts from dashboard pages with a headless browser",
    version="0.1.0",
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "message": "Logcount service is up and running",
        "version": "0.1.0",
    }


@app.post(
    "/fetch-logs",
    response_model=ExtractionResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def fetch_logs(request: FetchLogsRequest):
    """Fetch the log count from the dashboard at ``request.url``."""
    try:
        extraction_request = request.to_extraction_request()
    except InvalidRequestError as e:
        logger.warning(f"Rejected request: {e}")
        return JSONResponse(status_code=400, content=ErrorResponse(error=str(e)).model_dump())

    try:
        return await LogsFetchOrchestrator(extraction_request).run()
    except Exception as e:
        logger.error(f"Fetch logs failed: {e}")
        return JSONResponse(status_code=500, content=ErrorResponse(error=str(e)).model_dump())


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "logcount.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
    )
