"""Core module with frames, errors, units, config, and logging."""

__all__ = [
    "types",
    "units",
    "frames",
    "errors",
    "logging",
    "config",
]
