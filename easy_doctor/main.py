"""
Main application entry point for the Easy Doctor core.
"""

import uvicorn

from .api.app import create_app
from .config import get_settings

app = create_app()

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("easy_doctor.main:app", host=settings.host, port=settings.port, reload=settings.debug)
