from functools import wraps
from typing import Any, Callable, TypeVar

from fastmcp.exceptions import ToolError
from loguru import logger
from pydantic import ValidationError

from core.errors import UpstreamError, WebToolError

T = TypeVar("T")


def describe_error(exc: Exception) -> str:
    """One-line, traceback-free description of a failure."""
    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'input'}: {err['msg']}"
            for err in exc.errors()
        )
    return str(exc) or exc.__class__.__name__


def tool_boundary(action: str):
    """
    Decorator for MCP tool handlers.

    Any failure aborts the call with a single ToolError reading
    "Failed to <action>: <detail>". UpstreamError messages already name the
    failed action and pass through unprefixed.
    """
    def decorator(fn: Callable[..., T]) -> Callable[..., T]:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return fn(*args, **kwargs)
            except WebToolError as exc:
                logger.warning("{} failed ({}): {}", fn.__name__, exc.kind, exc)
                if isinstance(exc, UpstreamError):
                    raise ToolError(exc.message) from exc
                raise ToolError(f"Failed to {action}: {describe_error(exc)}") from exc
            except ValidationError as exc:
                logger.warning("{} rejected invalid input: {}", fn.__name__, describe_error(exc))
                raise ToolError(f"Failed to {action}: {describe_error(exc)}") from exc
            except Exception as exc:  # noqa: BLE001
                logger.exception("{}: unhandled error", fn.__name__)
                raise ToolError(f"Failed to {action}: {describe_error(exc)}") from exc
        return wrapper
    return decorator
