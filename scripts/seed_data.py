"""
Demo Data Generator for growthlog.
Prints realistic entries as JSON, ready to be loaded into an EntryStore.
"""

import datetime
import json
import random
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from growthlog.services.demo_data import generate_demo_entries


def main():
    days = int(sys.argv[1]) if len(sys.argv) > 1 else 14
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else None

    entries = generate_demo_entries(datetime.date.today(), days=days, rng=random.Random(seed))
    json.dump(
        [e.model_dump(mode="json", by_alias=True) for e in entries],
        sys.stdout,
        indent=2,
    )
    print()
    print(f"Generated {len(entries)} entries over {days + 1} days", file=sys.stderr)


if __name__ == "__main__":
    main()
