#!/usr/bin/env python
"""Script to run the kanban backend server."""
import sys
import os
from pathlib import Path

# Get the directory where this script is located
backend_dir = Path(__file__).resolve().parent

# Add backend directory to Python path
sys.path.insert(0, str(backend_dir))

# Change to backend directory
os.chdir(backend_dir)

# Now run uvicorn
import uvicorn

from kanban.config import HOST, LOG_FILE, LOG_LEVEL, PORT, RELOAD
from kanban.logging_setup import setup_logging

if __name__ == "__main__":
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)
    uvicorn.run(
        "kanban.main:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_config=None,
    )
