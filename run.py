#!/usr/bin/env python3
"""
Run script for the LinguistVision tutor backend
"""
import uvicorn

from linguist_vision.config.settings import settings
from linguist_vision.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
