"""
External process helpers.

Every driver and listing command goes through these functions so the
mounters never touch subprocess directly.
"""

import logging
import shutil
import subprocess
from typing import List, Optional

from ..core.exceptions import ProcessLaunchError


def find_program(program: str) -> Optional[str]:
    """Resolve a program on PATH, None when missing."""
    return shutil.which(program)


def run_command(cmd: List[str]) -> subprocess.CompletedProcess:
    """
    Run a command and wait for it to exit.

    Raises:
        ProcessLaunchError: the program could not be started
    """
    logging.debug(f"Executing: {' '.join(cmd)}")
    try:
        return subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        raise ProcessLaunchError(cmd, str(e)) from e


def launch_detached(cmd: List[str]) -> subprocess.Popen:
    """
    Start a command in the background without waiting for it.

    Raises:
        ProcessLaunchError: the program could not be started
    """
    logging.debug(f"Launching detached: {' '.join(cmd)}")
    creationflags = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
        subprocess, "CREATE_NEW_PROCESS_GROUP", 0
    )
    try:
        return subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            creationflags=creationflags,
        )
    except OSError as e:
        raise ProcessLaunchError(cmd, str(e)) from e


def capture_output(cmd: List[str]) -> str:
    """Return a command's stdout, or an empty string if it cannot be run."""
    try:
        result = run_command(cmd)
    except ProcessLaunchError as e:
        logging.warning(f"Listing command unavailable: {e}")
        return ""
    return result.stdout or ""
