"""
Run the API with ``python -m easy_doctor``.
"""

import uvicorn

from .config import get_settings
from .main import app

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
