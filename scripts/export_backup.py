"""
Snapshot backup script.

Writes ``dreamweaver-backup-<ISO-date>.json`` with the full local state
into BACKUP_DIR (or the directory given as first argument).

Usage:
    python scripts/export_backup.py [directory]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from dreamweaver.core.config import settings
from dreamweaver.core.logging import setup_logging
from dreamweaver.db.session import get_engine
from dreamweaver.db.storage import LocalStorage
from dreamweaver.services.snapshot_service import SnapshotService

if __name__ == "__main__":
    setup_logging(settings)
    directory = sys.argv[1] if len(sys.argv) > 1 else settings.BACKUP_DIR

    storage = LocalStorage.from_engine(get_engine())
    if not storage.store.available:
        print("Persistence is disabled, nothing to export.")
        sys.exit(1)

    path = SnapshotService(storage).write_backup(directory)
    print(f"Backup written to {path}")
