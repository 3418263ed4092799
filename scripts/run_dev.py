"""
Development server launcher.

Serves the API with auto-reload on HOST:PORT from settings.  Storage and
backend selection come from the same settings (see ``.env``).

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from dreamweaver.core.config import settings

if __name__ == "__main__":
    base_url = f"http://{settings.HOST}:{settings.PORT}"
    storage = settings.STORAGE_URL if settings.PERSISTENCE_ENABLED else "disabled (in-process only)"

    print(f"{settings.PROJECT_NAME} {settings.VERSION} (development)")
    print(f"  API:      {base_url}/api/v1")
    print(f"  Docs:     {base_url}/docs")
    print(f"  Storage:  {storage}")
    print(f"  Backend:  {settings.DATABASE_PROVIDER}")
    print()

    uvicorn.run("dreamweaver.main:app", host=settings.HOST, port=settings.PORT, reload=True,
                log_level=settings.LOG_LEVEL.lower())
