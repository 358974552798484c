"""Custom structlog processors and the console renderer."""

import os
import threading

from colorama import Fore, Style, init
from structlog.typing import EventDict, WrappedLogger

from core.logging.context import get_request_id

SERVICE_NAME_DEFAULT = "media-library"

_LEVEL_COLORS = {
    "DEBUG": Fore.CYAN,
    "INFO": Fore.GREEN,
    "WARNING": Fore.YELLOW,
    "ERROR": Fore.RED,
    "CRITICAL": Fore.RED + Style.BRIGHT,
}

# Keys already shown in the console prefix, or too noisy for a terminal
_CONSOLE_HIDDEN_KEYS = frozenset(
    {
        "level",
        "timestamp",
        "request_id",
        "logger",
        "event",
        "process_id",
        "thread_id",
        "service_name",
        "environment",
    }
)


def add_request_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach the current request id, when there is one."""
    request_id = get_request_id()
    if request_id:
        event_dict["request_id"] = request_id
    return event_dict


def add_service_context(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach service name and deployment environment."""
    event_dict["service_name"] = os.getenv("SERVICE_NAME", SERVICE_NAME_DEFAULT)
    event_dict["environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def add_process_info(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Attach process and thread ids, useful under multi-worker gunicorn."""
    event_dict["process_id"] = os.getpid()
    event_dict["thread_id"] = threading.get_ident()
    return event_dict


def console_renderer(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> str:
    """Render an event as a single coloured console line.

    Format: ``[LEVEL] timestamp | request_id | logger | event key=value ...``
    """
    init(autoreset=True)

    level = str(event_dict.get("level", "info")).upper()
    color = _LEVEL_COLORS.get(level, Fore.WHITE)

    line = (
        f"{color}[{level:<8}]{Style.RESET_ALL} "
        f"{event_dict.get('timestamp', '')} | "
        f"{Fore.MAGENTA}{event_dict.get('request_id', '-')}{Style.RESET_ALL} | "
        f"{Fore.BLUE}{event_dict.get('logger', 'root')}{Style.RESET_ALL} | "
        f"{event_dict.get('event', '')}"
    )

    extras = {k: v for k, v in event_dict.items() if k not in _CONSOLE_HIDDEN_KEYS}
    if extras:
        pairs = " ".join(f"{key}={value}" for key, value in extras.items())
        line += f" {Fore.YELLOW}{pairs}{Style.RESET_ALL}"

    return line
