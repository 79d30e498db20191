"""
Utilities package for gcs-mount.

Thin wrappers around external process execution.
"""

from .process import (
    find_program,
    run_command,
    launch_detached,
    capture_output,
)

__all__ = [
    "find_program",
    "run_command",
    "launch_detached",
    "capture_output",
]
