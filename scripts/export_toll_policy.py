"""Script to write the built-in toll policy to a JSON file.

The file can be edited and pointed to with TOLL_POLICY_JSON (or the CLI's
--policy option) to run the calculator with different tables.
"""

import sys
from pathlib import Path

# Make the project root importable (scripts/ -> project root)
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core.policy_loader import PolicyLoader
from src.models.defaults import DEFAULT_POLICY


def main():
    """Export the built-in policy to disk."""
    project_root = Path(__file__).parent.parent
    if len(sys.argv) > 1:
        output_path = Path(sys.argv[1])
    else:
        output_path = project_root / "policies" / f"toll_policy_{DEFAULT_POLICY.version}.json"

    if output_path.exists() and sys.stdin.isatty():
        response = input(f"{output_path} exists. Overwrite? (yes/no): ").strip().lower()
        if response not in ['yes', 'y']:
            print("Export cancelled.")
            return

    PolicyLoader.save_to_json(DEFAULT_POLICY, output_path)

    print(f"Policy version: {DEFAULT_POLICY.version}")
    print(f"Fee bands: {len(DEFAULT_POLICY.fee_schedule.bands)}")
    print(f"Saved to: {output_path}")
    print()
    print("Set TOLL_POLICY_JSON to this path to use the file instead of the built-in tables.")


if __name__ == "__main__":
    main()
