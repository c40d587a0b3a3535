from pathlib import Path
import argparse
import json
import os
import random
import sys

# Ensure repo root is on sys.path and is the working directory.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
os.chdir(ROOT)

from fastapi.encoders import jsonable_encoder

from pms.config import settings
from pms.logging import setup_logging
from pms.portfolio.performance import dashboard_overview
from pms.seed import seed_store
from pms.store import EntityStore

if __name__ == '__main__':
    parser = argparse.ArgumentParser(description="Generate the demo book and print its dashboard overview.")
    parser.add_argument('--seed', type=int, default=settings.seed_random_seed)
    parser.add_argument('--clients', type=int, default=settings.seed_client_count)
    args = parser.parse_args()

    setup_logging()
    store = EntityStore()
    counts = seed_store(store, random.Random(args.seed), args.clients)
    print('Seeded', ', '.join(f'{n} {kind}s' for kind, n in counts.items()))
    print(json.dumps(jsonable_encoder(dashboard_overview(store), by_alias=True), indent=2))
