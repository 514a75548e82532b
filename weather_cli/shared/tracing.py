"""
Tracing leve - modelo de spans planos sobre o logger estruturado

Uso:
    from weather_cli.shared.tracing import trace_operation

    @trace_operation("repository.get_by_city")
    async def get_by_city(...):
        ...

Cada span emite [SPAN_START]/[SPAN_END] com trace_id e duração. Funciona
com funções síncronas e corrotinas.
"""
import asyncio
import time
import uuid
from contextvars import ContextVar
from functools import wraps
from typing import Any, Callable, Optional

from weather_cli.shared.config.logger_config import get_logger

logger = get_logger(child=True)

_trace_id_var: ContextVar[Optional[str]] = ContextVar('trace_id', default=None)


def get_trace_id() -> str:
    """Get current trace_id or generate new one."""
    trace_id = _trace_id_var.get()
    if not trace_id:
        trace_id = str(uuid.uuid4())
        _trace_id_var.set(trace_id)
    return trace_id


def clear_trace_id() -> None:
    _trace_id_var.set(None)


def _span_start(span_name: str, trace_id: str) -> float:
    logger.debug(f"[SPAN_START] {span_name}", span_name=span_name, trace_id=trace_id)
    return time.perf_counter()


def _span_end(span_name: str, trace_id: str, started: float, error: Optional[BaseException]) -> None:
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    if error is None:
        logger.debug(
            f"[SPAN_END] {span_name}",
            span_name=span_name,
            trace_id=trace_id,
            span_duration_ms=duration_ms,
            span_status="completed"
        )
    else:
        logger.debug(
            f"[SPAN_END] {span_name}",
            span_name=span_name,
            trace_id=trace_id,
            span_duration_ms=duration_ms,
            span_status="failed",
            error=str(error),
            error_type=type(error).__name__
        )


def trace_operation(span_name: str) -> Callable:
    """
    Decorator que mede e registra a execução de uma operação

    Args:
        span_name: Nome do span (ex.: "openweather.get_by_city")
    """
    def decorator(func: Callable) -> Callable:
        if asyncio.iscoroutinefunction(func):
            @wraps(func)
            async def async_wrapper(*args, **kwargs) -> Any:
                trace_id = get_trace_id()
                started = _span_start(span_name, trace_id)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _span_end(span_name, trace_id, started, e)
                    raise
                _span_end(span_name, trace_id, started, None)
                return result
            return async_wrapper

        @wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            trace_id = get_trace_id()
            started = _span_start(span_name, trace_id)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _span_end(span_name, trace_id, started, e)
                raise
            _span_end(span_name, trace_id, started, None)
            return result
        return wrapper

    return decorator
