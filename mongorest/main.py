"""
This module defines the FastAPI application exposing the MongoDB REST backend.
It includes:
- Middleware to log incoming HTTP requests.
- Inclusion of the resource routes from the `mongorest.api.routers` module.
- A root endpoint (`/`) listing the configured resources.
Attributes:
- `app`: The FastAPI application instance.
"""

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, Request

from mongorest.api import routers
from mongorest.api.resources import get_resources
from mongorest.config import logger, settings


load_dotenv()

app = FastAPI(title=settings.PROJECT_NAME)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    """
    Middleware function logging the method and path of incoming HTTP requests.

    Args:
        request (Request): The incoming HTTP request object.
        call_next (Callable): A function to call the next middleware or endpoint handler.

    Returns:
        Response: The HTTP response returned by the next middleware or endpoint handler.
    """
    logger.info("Incoming %s request to %s", request.method, request.url.path)
    response = await call_next(request)
    return response


# Include API routes
for router in routers:
    app.include_router(router)
logger.info("API routes included")


@app.get("/")
def read_root(resources: dict = Depends(get_resources)):
    """
    Handles the root endpoint of the application.

    Returns:
        dict: The project name and the names of the configured resources.
    """
    return {"name": settings.PROJECT_NAME, "resources": sorted(resources)}
