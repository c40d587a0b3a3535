from pathlib import Path
import argparse
import os
import random
import sys

# Ensure repo root is on sys.path and is the working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

from pms.config import settings
from pms.logging import setup_logging
from pms.mcp.server import build_mcp_server
from pms.seed import seed_store
from pms.store import EntityStore

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Serve the portfolio tools over MCP stdio.")
    parser.add_argument('--seed', type=int, default=settings.seed_random_seed, help='random seed for the demo book')
    parser.add_argument('--clients', type=int, default=settings.seed_client_count)
    parser.add_argument('--empty', action='store_true', help='start without demo data')
    args = parser.parse_args()

    # stdout carries the protocol; logs go to stderr.
    setup_logging(stream=sys.stderr)
    store = EntityStore()
    if not args.empty:
        seed_store(store, random.Random(args.seed), args.clients)
    build_mcp_server(store, settings.mcp_server_name).run()
