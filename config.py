import os
from pathlib import Path

from dotenv import load_dotenv
load_dotenv()

TASKS_FILE = Path(os.getenv("TASKS_FILE", "tasks.json"))
HOST       = os.getenv("HOST", "0.0.0.0")
PORT       = int(os.getenv("PORT", "8080"))
LOG_LEVEL  = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR    = os.getenv("LOG_DIR", "")
