import os
import time
import logging
from datetime import datetime

from fonds_scrape.config import LOG_DIR

logging.getLogger("WDM").setLevel(logging.WARNING)
logging.getLogger("selenium").setLevel(logging.WARNING)

LOG_BUFFER = []
HAS_ERROR = False

def log(msg, error=False):
    global HAS_ERROR
    if error:
        HAS_ERROR = True
    timestamp = time.strftime('%H:%M:%S')
    print(f"[{timestamp}] {msg}")
    LOG_BUFFER.append(f"[{timestamp}] {msg}")

def reset_log():
    global HAS_ERROR
    HAS_ERROR = False
    LOG_BUFFER.clear()

def save_log_if_error(log_dir=LOG_DIR):
    """Dump the buffered log to Logs/fonds_<date>.log when the run hit an error."""
    if not HAS_ERROR: return None
    try:
        os.makedirs(log_dir, exist_ok=True)
        filename = os.path.join(log_dir, f"fonds_{datetime.now().strftime('%Y-%m-%d')}.log")
        with open(filename, "w", encoding="utf-8") as f:
            f.write("\n".join(LOG_BUFFER))
        return filename
    except OSError as e:
        print(f"Warning: Could not write log file: {e}")
        return None
