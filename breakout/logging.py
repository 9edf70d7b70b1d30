"""
Breakout Logging

Two channels share this module:

- Console loggers. ``get_logger(name)`` hands out a cached logger whose
  threshold comes from the environment or ``configure_logging``. Lines
  print as ``[name] LEVEL: message``.
- Session records. The game reports its milestones (game started, life
  lost, level cleared, game over) as dicts through ``emit_record``. A
  record reaches disk only if a sink was registered for its channel.

Usage:
    from breakout.logging import get_logger, emit_record

    log = get_logger('game_mode')
    log.info("Level %d cleared", level)
    emit_record('session', {'event': 'level_cleared', 'level': 2, 'score': 140})

Environment:
    BREAKOUT_LOG_LEVEL=DEBUG              # threshold for every logger
    BREAKOUT_LOG_GAME_MODE=DEBUG          # threshold for one logger
    BREAKOUT_LOG_DIR=/tmp/breakout        # where session records go
    BREAKOUT_LOGGING_SESSION_ENABLED=true # write 'session' records to disk
"""

import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, IO, Optional


class LogLevel(IntEnum):
    """Console thresholds, numbered like the stdlib logging levels."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


@dataclass
class LogSettings:
    """Mutable logging state, filled from the environment at import."""
    default_level: LogLevel = LogLevel.INFO
    module_levels: Dict[str, LogLevel] = field(default_factory=dict)
    record_dir: Optional[str] = None
    # channel -> {'enabled': bool, 'dir': str}
    channels: Dict[str, Dict[str, Any]] = field(default_factory=dict)


_settings = LogSettings()


def _parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug' or 'WARN'; unknown names give INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


# =============================================================================
# Session records
# =============================================================================

class LogSink(ABC):
    """Destination for session records."""

    @abstractmethod
    def emit(self, channel: str, record: Dict[str, Any]) -> None:
        """Store one JSON-serializable record for a channel."""

    @abstractmethod
    def close(self) -> None:
        """Release whatever the sink holds open."""


class FileSink(LogSink):
    """
    One JSONL file per channel, named ``<session>_<channel>.jsonl``.

    A file is created on its first record and starts with a header line;
    closing the sink appends a footer line to every file it opened.

    Args:
        log_dir: Target directory (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._dir = Path(log_dir) if log_dir else Path(get_log_dir())
        self._session = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._open: Dict[str, IO[str]] = {}
        self._paths: Dict[str, Path] = {}

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by channel."""
        return dict(self._paths)

    def _write(self, channel: str, payload: Dict[str, Any]) -> None:
        self._open[channel].write(json.dumps(payload) + "\n")

    def _start(self, channel: str) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._dir / f"{self._session}_{channel}.jsonl"
        self._open[channel] = path.open('a')
        self._paths[channel] = path
        self._write(channel, {
            "type": "header",
            "module": channel,
            "session_name": self._session,
            "start_time": time.time(),
        })

    def emit(self, channel: str, record: Dict[str, Any]) -> None:
        if channel not in self._open:
            self._start(channel)
        self._write(channel, {'wall_time': time.time(), **record})

    def close(self) -> None:
        for channel in list(self._open):
            self._write(channel, {"type": "footer", "module": channel, "end_time": time.time()})
            self._open.pop(channel).close()


class NullSink(LogSink):
    """Discards every record."""

    def emit(self, channel: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(channel: str, sink: LogSink) -> None:
    """Route records for a channel to sink, replacing any earlier one."""
    _sinks[channel] = sink


def emit_record(channel: str, record: Dict[str, Any]) -> bool:
    """
    Hand a record to the channel's sink.

    Returns:
        False when no sink is registered for the channel
    """
    sink = _sinks.get(channel)
    if sink is None:
        return False
    sink.emit(channel, record)
    return True


def close_all_sinks() -> None:
    while _sinks:
        _, sink = _sinks.popitem()
        sink.close()


def get_log_dir() -> str:
    """BREAKOUT_LOG_DIR if set, else $XDG_DATA_HOME/breakout/logs."""
    if _settings.record_dir:
        return str(Path(_settings.record_dir).expanduser())
    data_home = os.environ.get('XDG_DATA_HOME') or str(Path.home() / '.local' / 'share')
    return str(Path(data_home) / 'breakout' / 'logs')


def create_sink_for_environment(channel: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if BREAKOUT_LOGGING_<CHANNEL>_ENABLED is truthy, else NullSink."""
    options = _settings.channels.get(channel.lower(), {})
    if not options.get('enabled'):
        return NullSink()
    return FileSink(log_dir=options.get('dir'), session_name=session_name)


# =============================================================================
# Console loggers
# =============================================================================

def configure_logging(level: str = 'INFO', modules: Optional[Dict[str, str]] = None) -> None:
    """
    Set console thresholds.

    Args:
        level: Threshold for loggers without their own entry
        modules: Logger name -> threshold overrides
    """
    _settings.default_level = _parse_level(level)
    for name, name_level in (modules or {}).items():
        _settings.module_levels[name.lower()] = _parse_level(name_level)


def disable_logging() -> None:
    """Silence every console logger."""
    _settings.default_level = LogLevel.OFF
    _settings.module_levels.clear()


def _load_env_config(environ=os.environ) -> None:
    level_prefix = 'BREAKOUT_LOG_'
    channel_prefix = 'BREAKOUT_LOGGING_'

    for key, value in environ.items():
        if key.startswith(channel_prefix):
            channel, _, option = key[len(channel_prefix):].lower().rpartition('_')
            if not channel:
                continue
            options = _settings.channels.setdefault(channel, {})
            options[option] = _is_truthy(value) if option == 'enabled' else value
        elif key == 'BREAKOUT_LOG_LEVEL':
            _settings.default_level = _parse_level(value)
        elif key == 'BREAKOUT_LOG_DIR':
            _settings.record_dir = value
        elif key.startswith(level_prefix):
            _settings.module_levels[key[len(level_prefix):].lower()] = _parse_level(value)


_load_env_config()


class BreakoutLogger:
    """Prints ``[name] LEVEL: message`` lines at or above its threshold."""

    def __init__(self, module: str):
        self.module = module
        self._key = module.lower().replace('.', '_')

    @property
    def level(self) -> LogLevel:
        return _settings.module_levels.get(self._key, _settings.default_level)

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _print(self, level: LogLevel, msg: str, args: tuple) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {level.name}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._print(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._print(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._print(LogLevel.WARNING, msg, args)

    def error(self, msg: str, *args) -> None:
        self._print(LogLevel.ERROR, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> BreakoutLogger:
    """Cached logger for a module name."""
    return BreakoutLogger(module)
