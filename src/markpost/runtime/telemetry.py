"""Telemetry services built on telelog.

The rest of the package only touches this narrow surface:

``configure(...)`` -- adopt an explicit telelog config or a named preset
``get_logger(name)`` -- fetch (and cache) a configured logger
``record_event(name, ...)`` -- emit a structured event at a chosen level
``span(name, ...)`` -- profile a block and optionally track it as a component

With no arguments, ``configure`` honours ``MARKPOST_LOG_PRESET`` before
falling back to the individual ``MARKPOST_LOG_*`` switches.
"""

from __future__ import annotations

from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, Tuple, cast

import telelog  # type: ignore[import]

from .settings import env, env_flag, env_int

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = env("LOGGER", "markpost") or "markpost"
DEFAULT_LOG_FILE = env("LOG_FILE", "") or ""

# Each entry maps onto ``Config.with_<key>(value)``.
_PRESETS: Dict[str, Dict[str, Any]] = {
    "development": {
        "min_level": "DEBUG",
        "console_output": True,
        "colored_output": True,
        "json_format": False,
    },
    "production": {
        "min_level": "INFO",
        "console_output": False,
        "buffering": True,
        "file_output": "markpost.log",
    },
    "performance": {
        "min_level": "DEBUG",
        "console_output": False,
        "buffering": True,
        "json_format": True,
        "file_output": "markpost-performance.log",
    },
}
PRESET_NAMES: Tuple[str, ...] = tuple(_PRESETS)

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None
_ACTIVE_PRESET: Optional[str] = None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _format_pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _stringify(value)) for key, value in data.items()]


def _apply_settings(config: Any, settings: Dict[str, Any]) -> Any:
    for key, value in settings.items():
        getattr(config, f"with_{key}")(value)
    config.with_profiling(True)
    return config


def _build_preset_config(preset: str) -> Any:
    key = preset.strip().lower()
    if key not in _PRESETS:
        choices = ", ".join(PRESET_NAMES)
        raise ValueError(f"Unknown preset '{preset}' (expected one of: {choices}).")

    settings = dict(_PRESETS[key])
    if DEFAULT_LOG_FILE and "file_output" in settings:
        settings["file_output"] = DEFAULT_LOG_FILE
    return _apply_settings(tl.Config(), settings)


def _build_default_config() -> Any:
    console = not env_flag("DISABLE_CONSOLE", False)
    settings: Dict[str, Any] = {
        "min_level": (env("LOG_LEVEL") or "INFO").upper(),
        "console_output": console,
    }
    if console:
        settings["colored_output"] = not env_flag("NO_COLOR", False)
    if env_flag("LOG_JSON", False):
        settings["json_format"] = True
    if DEFAULT_LOG_FILE:
        settings["file_output"] = DEFAULT_LOG_FILE
    if env_flag("LOG_BUFFERED", False):
        settings["buffering"] = True
        settings["buffer_size"] = env_int("LOG_BUFFER_SIZE", 2048)
    return _apply_settings(tl.Config(), settings)


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Replace the active telelog configuration.

    ``config`` is an explicit ``telelog.Config``; ``preset`` names one of
    ``PRESET_NAMES``. The two are mutually exclusive. When neither is given
    the preset named by ``MARKPOST_LOG_PRESET`` is used, if any. Cached
    loggers are dropped so the next ``get_logger`` call picks up the new
    settings.
    """

    global _ACTIVE_CONFIG, _ACTIVE_PRESET
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    if config is None:
        preset = preset or env("LOG_PRESET") or None
        config = _build_preset_config(preset) if preset else _build_default_config()
    else:
        preset = None

    _ACTIVE_CONFIG = config
    _ACTIVE_PRESET = preset.strip().lower() if preset else None
    _LOGGER_CACHE.clear()


def active_preset() -> Optional[str]:
    """Name of the preset behind the active config, ``None`` for custom setups."""

    return _ACTIVE_PRESET


def _ensure_config() -> Any:
    global _ACTIVE_CONFIG
    if _ACTIVE_CONFIG is None:
        _ACTIVE_CONFIG = _build_default_config()
    return _ACTIVE_CONFIG


def get_logger(name: Optional[str] = None) -> Any:
    """Return a cached ``telelog.Logger`` bound to the active config."""

    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(
            logger_name, _ensure_config()
        )
    return _LOGGER_CACHE[logger_name]


def _resolve_level_method(
    logger: Any, level: Any, *, expect_data: bool = False
) -> Tuple[Any, bool]:
    name = str(level).lower()
    if expect_data:
        with_attr = getattr(logger, f"{name}_with", None)
        if with_attr is not None:
            return with_attr, True

    attr = getattr(logger, name, None)
    if attr is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return attr, False


def record_event(
    name: str,
    *,
    level: str | Any = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    log = get_logger(logger_name)
    payload = {"event": name, **(data or {})}
    method, accepts_data = _resolve_level_method(log, level, expect_data=True)
    message = f"event::{name}"
    if accepts_data:
        method(message, _format_pairs(payload))
    else:
        method(f"{message} {payload}")


@dataclass
class SpanHandle:
    """Handle yielded by ``span`` for attaching metadata mid-flight."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def _emit(
        self, level: str, message: str, extra: Optional[Dict[str, Any]] = None
    ) -> None:
        payload = {"span": self.span_name, **self.metadata}
        if self.component_name:
            payload["component"] = self.component_name
        if extra:
            payload.update({key: _stringify(val) for key, val in extra.items()})

        method, accepts = _resolve_level_method(self.logger, level, expect_data=True)
        if accepts:
            method(message, _format_pairs(payload))
        else:
            method(f"{message} {payload}")

    def fail(self, reason: str) -> None:
        self._emit("error", "span::fail", {"reason": reason})


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a code block and (optionally) track it as a component.

    Parameters
    ----------
    name:
        Operation name passed to ``logger.profile``.
    logger_name:
        Target logger; defaults to the package logger.
    component:
        ``True`` reuses ``name`` as the component id; a string is used as-is.
    metadata:
        Written as transient logger context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = None
    if component is True:
        component_name = name
    elif isinstance(component, str):
        component_name = component

    context_keys = []
    metadata_payload: Dict[str, Any] = {}
    if metadata:
        for key, value in metadata.items():
            serialized = _stringify(value)
            metadata_payload[key] = serialized
            log.add_context(key, serialized)
            context_keys.append(key)

    with ExitStack() as stack:
        if component_name:
            stack.enter_context(log.track_component(component_name))

        stack.enter_context(log.profile(name))
        handle = SpanHandle(
            logger=log,
            span_name=name,
            component_name=component_name,
            metadata=dict(metadata_payload),
        )

        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise
        finally:
            for key in context_keys:
                log.remove_context(key)


configure()
logger = get_logger()

__all__ = [
    "PRESET_NAMES",
    "SpanHandle",
    "active_preset",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
