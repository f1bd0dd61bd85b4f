"""Call logging for the fleet risk data and service layers.

Each decorated call writes a ``CALL`` line, then either an ``OK`` line with
a short description of what came back or a ``FAIL`` line naming the
exception. Everything goes to ``logs/api_calls.log``.
"""

from __future__ import annotations

import functools
import logging
import os
import threading
import time
from typing import Any, Callable, TypeVar

from fleetrisk.models.fleet import FleetSummary, VehicleRiskView
from fleetrisk.models.sensor import SensorSeries
from fleetrisk.models.vehicle import VehicleTelemetry
from fleetrisk.models.weather import WeatherReading

F = TypeVar("F", bound=Callable[..., Any])

LOGGER_NAME = "fleetrisk.api"

_LOG_DIR = os.path.join(os.getcwd(), "logs")
_LOG_FILE = os.path.join(_LOG_DIR, "api_calls.log")

_logger: logging.Logger | None = None
_logger_lock = threading.Lock()


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(h, logging.FileHandler) and h.baseFilename == target
        for h in logger.handlers
    )


def _get_logger() -> logging.Logger:
    """Return the call logger with a file handler on the current log file.

    Handlers installed by the host application are left alone.
    """
    global _logger
    if _logger is not None:
        return _logger

    with _logger_lock:
        if _logger is not None:
            return _logger

        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

        if not _has_file_handler(logger, _LOG_FILE):
            os.makedirs(_LOG_DIR, exist_ok=True)
            handler = logging.FileHandler(_LOG_FILE, encoding="utf-8")
            handler.setFormatter(
                logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"),
            )
            logger.addHandler(handler)

        _logger = logger
    return _logger


@functools.singledispatch
def describe_result(result: Any) -> str:
    """Summarize a return value for the ``OK`` log line."""
    return type(result).__name__


@describe_result.register(type(None))
def _(result: None) -> str:
    return "nothing"


@describe_result.register(bool)
def _(result: bool) -> str:
    return str(result)


@describe_result.register(int)
def _(result: int) -> str:
    return f"count={result}"


@describe_result.register(list)
@describe_result.register(tuple)
def _(result: list[Any] | tuple[Any, ...]) -> str:
    if result and all(isinstance(item, VehicleTelemetry) for item in result):
        return f"{len(result)} vehicles"
    if result and all(isinstance(item, VehicleRiskView) for item in result):
        return f"{len(result)} views"
    return f"{len(result)} items"


@describe_result.register(SensorSeries)
def _(result: SensorSeries) -> str:
    samples = sum(len(ch.samples) for ch in result.channels)
    return f"{len(result.channels)} channels, {samples} samples"


@describe_result.register(WeatherReading)
def _(result: WeatherReading) -> str:
    return (
        f"{result.weather_main} {result.temperature:.1f}C "
        f"wind={result.wind_speed:.1f}m/s precip={result.precipitation:.1f}mm"
    )


@describe_result.register(VehicleRiskView)
def _(result: VehicleRiskView) -> str:
    a = result.assessment
    return f"{a.vehicle_id} {a.risk_level.value} score={a.risk_score}"


@describe_result.register(FleetSummary)
def _(result: FleetSummary) -> str:
    return f"total={result.total} critical={result.critical} warning={result.warning} ok={result.ok}"


def log_cache_lookup(cache: str, key: str, hit: bool) -> None:
    """Record whether a cached provider value was reused."""
    _get_logger().info("CACHE %s: %s[%s]", "HIT" if hit else "MISS", cache, key)


def _arg_summary(args: tuple[Any, ...], kwargs: dict[str, Any]) -> str:
    # skip 'self'
    parts = [repr(a) for a in args[1:]]
    parts += [f"{k}={v!r}" for k, v in kwargs.items()]
    return ", ".join(parts)


def _logged(fn: F, prefix: str) -> F:
    @functools.wraps(fn)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        logger = _get_logger()
        call = f"{fn.__qualname__}({_arg_summary(args, kwargs)})"
        logger.info("%sCALL: %s", prefix, call)

        start = time.monotonic()
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            logger.error(
                "%sFAIL: %s -> %s: %s (%.3fs)",
                prefix, call, type(exc).__name__, exc, time.monotonic() - start,
            )
            raise
        logger.info(
            "%sOK: %s -> %s (%.3fs)",
            prefix, call, describe_result(result), time.monotonic() - start,
        )
        return result

    return wrapper  # type: ignore[return-value]


def log_api_call(fn: F) -> F:
    """Log a repository method: provider fetches and what they returned."""
    return _logged(fn, "")


def log_service_call(fn: F) -> F:
    """Log a service-layer method and the result it produced."""
    return _logged(fn, "SERVICE ")
