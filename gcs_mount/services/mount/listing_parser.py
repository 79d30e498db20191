"""
Mountpoint table parsers.

Each function takes the raw text of one platform's listing command and
returns a MountTable. Column positions come from the command's own header
line, so the parsers are tied to the exact output format of:

- ``GCSDokan -l``: header line, then ``<mountpoint>\\t\\t<remote>`` rows
- ``df --type=fuse --output=source,used,target`` (Linux)
- ``df -t osxfuse`` (macOS), which prints extra columns before the target
"""

import logging
import re
from typing import Callable, List

from ...models import MountRecord, MountTable

DOKAN_FIELD_SEPARATOR = re.compile(r" *\t{2,}")
HEADER_GAP = re.compile(r" +")
TRAILING_USED = re.compile(r"\s+\d+$")


def _non_empty_lines(output: str) -> List[str]:
    return [line.rstrip("\r\n") for line in output.splitlines() if line.strip()]


def parse_dokan_listing(output: str) -> MountTable:
    """Parse ``GCSDokan -l`` output, swapping its columns into (remote, mountpoint)."""
    lines = _non_empty_lines(output)[1:]
    records = []
    for line in lines:
        fields = DOKAN_FIELD_SEPARATOR.split(line.strip())
        if len(fields) != 2:
            logging.warning(f"Skipping unparsable GCSDokan listing line: {line!r}")
            continue
        mountpoint, remote = fields
        records.append(MountRecord(remote=remote, mountpoint=mountpoint))
    return MountTable(records)


def linux_target_start(gaps: List[int]) -> int:
    """Target column starts at the gap after the used column."""
    return gaps[1]


def macos_target_start(gaps: List[int]) -> int:
    """Target column starts at the gap before ``Mounted on``."""
    return gaps[-2]


def parse_df_listing(
    output: str, target_start: Callable[[List[int]], int] = linux_target_start
) -> MountTable:
    """
    Parse ``df`` output into (remote, mountpoint) records.

    The source is read up to the header's second whitespace run with the
    trailing numeric used figure removed. The target is read from the
    position chosen by ``target_start`` to the end of the line.
    """
    lines = _non_empty_lines(output)
    if len(lines) < 2:
        return MountTable()

    header, rows = lines[0], lines[1:]
    gaps = [match.start() for match in HEADER_GAP.finditer(header.rstrip())]
    if len(gaps) < 2:
        logging.warning(f"Unexpected df header, cannot locate columns: {header!r}")
        return MountTable()

    source_end = gaps[1]
    target_col = target_start(gaps)

    records = []
    for row in rows:
        remote = TRAILING_USED.sub("", row[:source_end].rstrip()).strip()
        mountpoint = row[target_col:].strip()
        records.append(MountRecord(remote=remote, mountpoint=mountpoint))
    return MountTable(records)


def parse_macos_df_listing(output: str) -> MountTable:
    return parse_df_listing(output, target_start=macos_target_start)
