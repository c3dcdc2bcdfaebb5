"""Run the development server. Usage: python run.py"""
import uvicorn

from app.config import settings


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)
