"""
Script to export the {entries, analytics, dateRange} triple for a window
described in a YAML configuration.

Example configuration:

    entries: demo_entries.json   # output of seed_data.py
    view: month                  # day, week, month or custom
    anchor: 2024-01-15
    start: 2024-01-01            # custom only
    end: 2024-01-10              # custom only
    output_dir: reports
"""

import datetime
import json
import sys
import yaml
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from growthlog.domain.models import ViewType
from growthlog.services.entry_store import EntryStore
from growthlog.services.export_service import build_export, write_export
from growthlog.services.range_filter import window_for


def main():
    if len(sys.argv) < 2:
        print("Usage: python generate_report.py <config_file.yaml>")
        sys.exit(1)

    config_path = Path(sys.argv[1])
    if not config_path.exists():
        print(f"Error: Config file '{config_path}' not found.")
        sys.exit(1)

    print(f"Loading configuration from {config_path}...")
    with open(config_path, 'r', encoding='utf-8') as f:
        config = yaml.safe_load(f) or {}

    entries_path = config_path.parent / config.get("entries", "entries.json")
    with open(entries_path, 'r', encoding='utf-8') as f:
        store = EntryStore(json.load(f))

    try:
        window = window_for(
            ViewType(config.get("view", "month")),
            config.get("anchor") or datetime.date.today(),
            config.get("start"),
            config.get("end"),
        )
    except Exception as e:
        print(f"Error parsing configuration: {e}")
        sys.exit(1)

    print(f"Exporting {window.start} - {window.end} ({len(store)} entries in store)")
    data = build_export(store.all(), window)

    output_dir = config_path.parent / config.get("output_dir", ".")
    output_file = write_export(data, output_dir)

    print(f"Report successfully saved to: {output_file.absolute()}")


if __name__ == "__main__":
    main()
