"""Web routes for Jinja2 + HTMX pages"""
from fastapi import APIRouter
from app.web import converter

web_router = APIRouter()

# Include web route modules
web_router.include_router(converter.router, tags=["web-converter"])
