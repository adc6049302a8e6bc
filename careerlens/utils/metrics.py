"""
In-process counters and latency samples, served by GET /metrics.

Counter names used by the model invoker:

    ai.<call_site>.success
    ai.<call_site>.fallback
    ai.<call_site>.fallback.<reason>
    gemini.<call_site>.success | .error
    gemini.<call_site>.duration_ms      (latency samples)

Values reset on process restart; each worker keeps its own.
"""

import time
from collections import defaultdict, deque
from contextlib import asynccontextmanager
from typing import Any, Deque, Dict

from careerlens.utils.logger import get_logger

logger = get_logger("metrics")

SAMPLE_WINDOW = 500

_counters: Dict[str, int] = defaultdict(int)
_samples: Dict[str, Deque[float]] = defaultdict(lambda: deque(maxlen=SAMPLE_WINDOW))


def inc(name: str, value: int = 1) -> None:
    _counters[name] += value


def observe(name: str, value: float) -> None:
    _samples[name].append(value)


@asynccontextmanager
async def track_duration(service: str, operation: str):
    """
    Time the wrapped await and count it as success or error.

        async with track_duration("gemini", "deep_dive"):
            text = await client.generate_text(prompt)
    """
    start = time.monotonic()
    outcome = "error"
    try:
        yield
        outcome = "success"
    finally:
        duration_ms = round((time.monotonic() - start) * 1000, 1)
        observe(f"{service}.{operation}.duration_ms", duration_ms)
        inc(f"{service}.{operation}.{outcome}")
        logger.debug(
            f"{service}.{operation} {outcome} in {duration_ms}ms",
            extra={"service": service, "operation": operation, "duration_ms": duration_ms, "status": outcome},
        )


def get_counter(name: str) -> int:
    return _counters.get(name, 0)


def _percentile(ordered: list, fraction: float) -> float:
    return ordered[min(int(len(ordered) * fraction), len(ordered) - 1)]


def _call_sites() -> Dict[str, Dict[str, Any]]:
    """Fold ai.* counters into {call_site: {success, fallback, reasons}}."""
    sites: Dict[str, Dict[str, Any]] = {}
    for name, value in _counters.items():
        parts = name.split(".")
        if parts[0] != "ai" or len(parts) < 3:
            continue
        site = sites.setdefault(parts[1], {"success": 0, "fallback": 0, "reasons": {}})
        if len(parts) == 3 and parts[2] in ("success", "fallback"):
            site[parts[2]] = value
        elif len(parts) == 4 and parts[2] == "fallback":
            site["reasons"][parts[3]] = value
    return sites


def get_snapshot() -> Dict[str, Any]:
    latencies = {}
    for name, samples in _samples.items():
        if not samples:
            continue
        ordered = sorted(samples)
        latencies[name] = {
            "count": len(ordered),
            "p50": round(_percentile(ordered, 0.5), 1),
            "p95": round(_percentile(ordered, 0.95), 1),
            "max": round(ordered[-1], 1),
        }

    return {
        "counters": dict(_counters),
        "ai": _call_sites(),
        "latency_ms": latencies,
    }


def reset() -> None:
    _counters.clear()
    _samples.clear()
