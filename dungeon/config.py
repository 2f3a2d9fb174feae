from __future__ import annotations

import os

MAX_SESSIONS = int(os.getenv("MAX_SESSIONS", "50"))
EVICT_ON_GET = os.getenv("EVICT_ON_GET", "true").lower() != "false"
LOG_LIMIT = int(os.getenv("LOG_LIMIT", "1000"))
LEVELS_DIR = os.getenv("LEVELS_DIR")
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
