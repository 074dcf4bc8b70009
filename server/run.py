#!/usr/bin/env python3
"""
Run script for the FastAPI server.
This script ensures the correct Python path is set before starting uvicorn.
"""
import sys
from pathlib import Path

# Add the server directory to Python path
server_dir = Path(__file__).parent
if str(server_dir) not in sys.path:
    sys.path.insert(0, str(server_dir))

import uvicorn

from app.config import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.host, port=settings.port, reload=True)
