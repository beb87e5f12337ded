"""
Export Service - Builds the {entries, analytics, dateRange} triple for a
window and writes it as JSON for the report renderer.

Architecture Decision: Why JSON?
- The renderer (HTML/PDF) lives outside this package and only needs data
- Human-readable and easy to diff between two runs
- camelCase keys match what the renderer already consumes
"""

import logging
import os
from pathlib import Path
from typing import Iterable, Optional

from growthlog.domain.models import DateWindow, ExportData, TimeEntry
from growthlog.services.aggregator import aggregate
from growthlog.services.range_filter import filter_entries

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "time-tracking-report-"
EXPORT_EXTENSION = ".json"


def build_export(entries: Iterable[TimeEntry], window: DateWindow) -> ExportData:
    """
    Collect the entries of a window together with their statistics.

    Entries are ordered newest date first and by start time within a day.
    """
    selected = filter_entries(entries, window)
    # Two stable sorts: start time ascending, then date descending
    selected.sort(key=lambda e: e.start_time)
    selected.sort(key=lambda e: e.date, reverse=True)
    return ExportData(entries=selected, analytics=aggregate(selected, window), date_range=window)


def export_filename(window: DateWindow) -> str:
    """time-tracking-report-<start>-to-<end>.json"""
    return f"{EXPORT_PREFIX}{window.start.isoformat()}-to-{window.end.isoformat()}{EXPORT_EXTENSION}"


def _get_default_export_dir() -> Path:
    """Get the default export directory based on OS"""
    if os.name == 'nt':  # Windows
        base = Path(os.getenv('APPDATA', Path.home())) / 'growthlog'
    else:  # Linux/Mac
        base = Path.home() / '.local' / 'share' / 'growthlog'
    return base / 'exports'


def write_export(data: ExportData, directory: Optional[Path] = None) -> Path:
    """
    Write an export triple to disk.

    Args:
        data: The triple to write
        directory: Target directory; defaults to the user's data directory

    Returns:
        Path of the written file
    """
    directory = Path(directory) if directory else _get_default_export_dir()
    directory.mkdir(parents=True, exist_ok=True)

    output_file = directory / export_filename(data.date_range)
    with open(output_file, 'w', encoding='utf-8') as f:
        f.write(data.model_dump_json(by_alias=True, indent=2))

    logger.info(f"Export written: {output_file} ({len(data.entries)} entries)")
    return output_file
