#!/usr/bin/env python
"""Export the Strawberry GraphQL schema SDL.

Default output: graphql_api/schema.graphql
Override path: --out <path>

Exit codes:
    0 success
    1 import failure
    3 unexpected error
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
# Project root on sys.path for 'import app'
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))
DEFAULT_OUT = BASE_DIR / "graphql_api" / "schema.graphql"


def main() -> None:
    parser = argparse.ArgumentParser(description="Export GraphQL schema SDL")
    parser.add_argument("--out", dest="out", default=str(DEFAULT_OUT))
    args = parser.parse_args()

    out_path = Path(args.out).resolve()
    out_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        from app import schema

        out_path.write_text(schema.as_str().strip() + "\n", encoding="utf-8")
        print(f"[INFO] schema SDL written to {out_path}")
    except ModuleNotFoundError as e:
        print(f"[ERROR] Cannot import app module: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"[ERROR] Unexpected failure exporting schema: {e}", file=sys.stderr)
        sys.exit(3)


if __name__ == "__main__":
    main()
