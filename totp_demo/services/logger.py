import csv
import logging
import os
import threading
import time

from totp_demo.core.config import settings

logger = logging.getLogger(__name__)

HEADER = ["timestamp", "event_type", "account", "outcome", "latency_ms"]

_write_lock = threading.Lock()

# Appends one audit row per provisioning/verification outcome.
# Never pass secrets, URIs or submitted codes in here.
# Best effort: a write failure is logged and never fails the request.
def log_event(event_type: str, account: str, outcome: str, latency_ms: int = 0):
    path = settings.EVENT_LOG_FILE
    if not path:
        return

    with _write_lock:
        try:
            # Initialize CSV with headers if it doesn't exist
            new_file = not os.path.exists(path)
            with open(path, "a", newline="") as f:
                writer = csv.writer(f)
                if new_file:
                    writer.writerow(HEADER)
                writer.writerow([time.time(), event_type, account, outcome, latency_ms])
        except OSError:
            logger.exception(f"Could not write audit event {event_type} for account={account} to {path}")
