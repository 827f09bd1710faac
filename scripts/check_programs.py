"""
Check that every configured program loads and report its shape
"""
import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import settings
from src.programs.errors import ProgramLoadError
from src.programs.source import ProgramSource


def main():
    parser = argparse.ArgumentParser(description="Check workout program files")
    parser.add_argument("program_ids", nargs="*", help="Programs to check (default: all configured)")
    parser.add_argument("--source", default=None, help="Directory or http(s) base URL (default: settings.data_source)")
    args = parser.parse_args()

    source = ProgramSource(location=args.source)
    program_ids = args.program_ids or settings.program_ids

    print(f"Checking {len(program_ids)} programs in {source.location}")
    print("-" * 50)

    failures = 0
    for program_id in program_ids:
        try:
            document = source.load(program_id)
        except ProgramLoadError as e:
            failures += 1
            print(f"✗ {e}")
            continue

        exercise_count = sum(len(day.exercises) for day in document.days)
        cooldown = "yes" if document.cooldown else "no"
        print(f"✓ {program_id}: {document.name}")
        print(f"  Days: {len(document.days)} | Exercises: {exercise_count} | "
              f"Warm-up options: {len(document.warmup_options)} | Cool-down: {cooldown}")

    print("-" * 50)
    print(f"{len(program_ids) - failures}/{len(program_ids)} programs loaded")

    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
