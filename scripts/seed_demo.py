"""
Seed script for a running MineSentry API.

Usage:
  - Dry run (default): python scripts/seed_demo.py
  - Post to the server: python scripts/seed_demo.py --apply
  - Other host: python scripts/seed_demo.py --apply --base-url http://127.0.0.1:9000

Behavior:
  - Loads `demo_seed.json` from the working directory if present, else the
    built-in demo reports below.
  - POSTs each entry to /api/reports (and /api/alerts when an "alerts" list is given).

NOTE: The store is in-memory, so seeded data is gone when the server restarts.
"""

import argparse
import json
import os
from typing import Any, Dict

import httpx

DEFAULT_SEED: Dict[str, Any] = {
    "reports": [
        {
            "location": {"lat": 5.29, "lng": -1.98},
            "description": "Turbid river water",
            "category": "Water Pollution",
            "userId": "u1",
            "userName": "Ama",
        },
        {
            "location": {"lat": 6.2019, "lng": -1.6586},
            "description": "Fresh clearing along the forest reserve boundary",
            "category": "Deforestation",
        },
        {
            "location": {"lat": 6.0123, "lng": -1.8625},
            "description": "Abandoned pits filled with stagnant water",
            "category": "Land Degradation",
        },
    ],
    "alerts": [
        {
            "region": {"name": "Tarkwa", "coordinates": [[5.28, -2.0], [5.31, -1.96]]},
            "frequency": "weekly",
            "delivery": ["in-app", "email"],
            "userId": "u1",
        },
    ],
}


def load_seed(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return DEFAULT_SEED
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def post_all(client: httpx.Client, seed: Dict[str, Any], apply: bool = False) -> None:
    for collection, endpoint in (("reports", "/api/reports"), ("alerts", "/api/alerts")):
        for entry in seed.get(collection, []):
            label = entry.get("description") or entry.get("region", {}).get("name")
            print(f"Preparing: {collection} - {label}")
            if not apply:
                continue
            try:
                resp = client.post(endpoint, json=entry)
                resp.raise_for_status()
                print(f"Created: {collection}/{resp.json()['id']}")
            except httpx.HTTPError as e:
                print(f"Failed to create {collection} entry '{label}': {e}")


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--apply", action="store_true", help="POST the seed instead of dry-run")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--seed-file", default=os.path.join(os.getcwd(), "demo_seed.json"))
    args = parser.parse_args()

    seed = load_seed(args.seed_file)

    with httpx.Client(base_url=args.base_url, timeout=10.0) as client:
        post_all(client, seed, apply=args.apply)

    if args.apply:
        print("Seeding completed.")
    else:
        print("Dry run complete. Re-run with --apply to post to the API.")


if __name__ == "__main__":
    main()
