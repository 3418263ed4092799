"""
Database initialization script.

Run this script to create the key-value table.

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dreamweaver.core.logging import setup_logging
from dreamweaver.db.init_db import init_db

if __name__ == "__main__":
    setup_logging()
    print("=" * 50)
    print("DreamWeaver Storage Initialization")
    print("=" * 50)
    print()

    try:
        init_db()
        print()
        print("=" * 50)
        print("SUCCESS: Storage initialized!")
        print("=" * 50)
        sys.exit(0)

    except Exception as e:
        print()
        print("=" * 50)
        print("ERROR: Storage initialization failed!")
        print(f"Details: {e}")
        print("=" * 50)
        sys.exit(1)
