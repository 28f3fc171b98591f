# rusuku/core/verbose.py
# Verbose logging utilities - delegates to unified OutputManager w/ structured logging for timer transitions, key dispatch, frames & file I/O

from __future__ import annotations

from pathlib import Path

from .output import get_output_manager, set_output_manager, OutputLevel


# * Initialize verbose logging for a session
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    if enabled and dev_mode:
        requested_level = OutputLevel.DEBUG
    elif enabled:
        requested_level = OutputLevel.VERBOSE
    else:
        requested_level = OutputLevel.NORMAL

    # ! lazy import keeps core free of a module-level cli dependency
    from ..cli.output_manager import OutputManager

    manager = OutputManager()
    manager.initialize(
        requested_level=requested_level,
        dev_mode=dev_mode,
        log_file=log_file,
    )
    set_output_manager(manager)


# * Check if verbose logging is enabled
def is_verbose_enabled() -> bool:
    return get_output_manager().is_verbose_enabled()


# * Core verbose logging function
def vlog(category: str, message: str, detail: str | None = None) -> None:
    get_output_manager().verbose(message, category, detail)


# * Log an effective timer state transition
def vlog_timer_transition(transition: str, elapsed_seconds: float) -> None:
    get_output_manager().verbose(
        f"{transition} (elapsed {elapsed_seconds:.3f}s)", "TIMER"
    )


# * Log a dispatched key & the action it mapped to
def vlog_key(key_repr: str, action: str | None) -> None:
    label = action if action is not None else "ignored"
    get_output_manager().verbose(f"Key {key_repr} -> {label}", "INPUT")


# * Log frame geometry (debug only; emitted on terminal resize)
def vlog_frame(width: int, height: int) -> None:
    get_output_manager().debug(f"Frame resized to {width}x{height}", "RENDER")


# * Log file read operation
def vlog_file_read(path: Path, size: int | None = None) -> None:
    size_str = f" ({size:,} bytes)" if size is not None else ""
    get_output_manager().verbose(f"Read: {path}{size_str}", "FILE")
