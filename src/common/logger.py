"""
Logging setup for the resume layout tooling.

PDF requests log through a ``RenderLogAdapter`` that carries the request's
context (request id, stage, template, page size) and prefixes it onto every
message, so one request can be followed from layout to render.
"""

import json
import logging
import sys
from typing import Any, Mapping, MutableMapping, Optional, Tuple


class RenderLogAdapter(logging.LoggerAdapter):
    """
    Logger adapter that prefixes messages with request context.

    Example output:
        [req:3f2a9c1b] [render] [template:classic] [A4] Rendering 2 page(s)
    """

    def process(self, msg: Any, kwargs: MutableMapping[str, Any]) -> Tuple[Any, MutableMapping[str, Any]]:
        prefix = format_context(self.extra)
        return (f"{prefix} {msg}" if prefix else msg), kwargs

    def bind(self, **context: Any) -> "RenderLogAdapter":
        """Return a new adapter with extra context merged in."""
        return RenderLogAdapter(self.logger, {**self.extra, **context})


def format_context(context: Mapping[str, Any]) -> str:
    """Build the ``[req:..] [stage] ...`` prefix from the known context keys."""
    parts = []
    request_id = context.get("request_id")
    if request_id:
        parts.append(f"[req:{str(request_id)[:8]}]")
    if context.get("stage"):
        parts.append(f"[{context['stage']}]")
    if context.get("template"):
        parts.append(f"[template:{context['template']}]")
    if context.get("page_size"):
        parts.append(f"[{context['page_size']}]")
    return " ".join(parts)


class JsonFormatter(logging.Formatter):
    """One JSON object per line for log aggregators."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(level: str = "INFO", format: str = "simple") -> None:
    """
    Configure the root logger.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Log format ("simple" or "json")
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    if format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))

    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


def get_logger(
    name: str,
    request_id: Optional[str] = None,
    stage: Optional[str] = None,
    **context: Any,
) -> RenderLogAdapter:
    """
    Get a context-prefixed logger.

    Args:
        name: Logger name (usually __name__)
        request_id: Optional request identifier
        stage: Optional stage name ("layout", "render")
        **context: Further prefix context (template, page_size)
    """
    return RenderLogAdapter(
        logging.getLogger(name),
        {"request_id": request_id, "stage": stage, **context},
    )
