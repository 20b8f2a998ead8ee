#!/usr/bin/env python3
"""Script to start the FastAPI server."""

import sys
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from dotenv import load_dotenv
import uvicorn

load_dotenv()


def main():
    """Start the API server."""
    parser = argparse.ArgumentParser(description="Serve the Vade Mecum API")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    args = parser.parse_args()

    print("=== Vade Mecum: API Server ===")
    uvicorn.run("vademecum.api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
