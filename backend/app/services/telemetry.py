import time
import json
import logging
from typing import Optional

logger = logging.getLogger("numberwalls.telemetry")


def emit_event(event: str, *, ceiling: Optional[int] = None,
               hidden: Optional[list[str]] = None, ok: Optional[bool] = None,
               right: Optional[int] = None, wrong: Optional[int] = None,
               latency_ms: Optional[int] = None):
    payload = {
        "event": event,
        "ceiling": ceiling,
        "hidden": hidden,
        "ok": ok,
        "right": right,
        "wrong": wrong,
        "latency_ms": latency_ms,
        "ts": time.time(),
    }
    # single-line JSON so round logs can be grepped and parsed
    logger.info("telemetry=%s", json.dumps(payload, separators=(",", ":")))
