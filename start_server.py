#!/usr/bin/env python3
"""Launch the player registry API.

Usage:
    ./start_server.py                  # Serve on 127.0.0.1:8080, in-memory storage
    ./start_server.py --storage json   # Persist players to PLAYER_API_DATA_FILE
    ./start_server.py --port 9000      # Use custom port
"""

import argparse
import os

import uvicorn

from player_api.env_config import STORAGE_BACKENDS


def main():
    parser = argparse.ArgumentParser(description="Launch the player registry API")
    parser.add_argument("--port", type=int, default=8080, help="Server port (default: 8080)")
    parser.add_argument("--host", default="127.0.0.1", help="Server host (default: 127.0.0.1)")
    parser.add_argument(
        "--storage",
        choices=STORAGE_BACKENDS,
        help="Storage backend (default: PLAYER_API_STORAGE or memory)",
    )
    parser.add_argument("--data-file", help="JSON store path for --storage json")
    args = parser.parse_args()

    if args.storage:
        os.environ["PLAYER_API_STORAGE"] = args.storage
    if args.data_file:
        os.environ["PLAYER_API_DATA_FILE"] = args.data_file

    print(f"Player registry running at http://{args.host}:{args.port}/rest/players")

    uvicorn.run("player_api.server:app", host=args.host, port=args.port, reload=False)


if __name__ == "__main__":
    main()
