import os
from datetime import datetime

from ..core.models import DEFAULT_BUFFER_SIZE, DEFAULT_CHUNK_SIZE

# ---------------- Configuration Constants ----------------

CHUNK_SIZE = int(os.getenv("PARTSPLIT_CHUNK_SIZE", DEFAULT_CHUNK_SIZE))
BUFFER_SIZE = int(os.getenv("PARTSPLIT_BUFFER_SIZE", DEFAULT_BUFFER_SIZE))
LOG_DIR = os.getenv("PARTSPLIT_LOG_DIR", os.path.join(os.getcwd(), "logs"))

# ---------------- Shared Logging Function ----------------

def log(message, context="PARTSPLIT", log_dir=None):
    timestamp = datetime.now().strftime("[%Y-%m-%d %H:%M:%S]")
    formatted = f"[{context}] {timestamp} {message}"
    log_dir = log_dir or LOG_DIR

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, f"{context.lower()}.log")
    with open(log_file, "a") as f:
        f.write(formatted + "\n")

    print(formatted)

# ---------------- Public API ----------------

__all__ = ["CHUNK_SIZE", "BUFFER_SIZE", "LOG_DIR", "log"]
