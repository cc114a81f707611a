#!/usr/bin/env python
"""Drive a running Product Registry through a create/update scenario.

Binds the authority (unless already bound), registers one product with a
random content hash, renames it, and prints each response.

Usage:
    # Against a local server
    python scripts/simulate_registry_calls.py

    # Custom caller, authority and product name
    python scripts/simulate_registry_calls.py \
        --caller ST1TEST \
        --authority ST2TEST \
        --name WidgetA
"""

import argparse
import asyncio
import json
import secrets
import sys
from pathlib import Path

import httpx


def build_product(name: str, expiry: int) -> dict:
    """Build a create payload with a random 32-byte hash."""
    return {
        "name": name,
        "hash": secrets.token_hex(32),
        "max_quantity": 1000,
        "origin": "FactoryX",
        "batch_id": "Batch001",
        "description": "Simulated product",
        "product_type": "electronics",
        "category": "gadgets",
        "location": "CityZ",
        "currency": "STX",
        "min_quantity": 100,
        "expiry": expiry,
        "weight": 500,
        "dimensions": "10x10x10",
        "material": "Plastic",
        "certification": "ISO9001",
    }


def show(label: str, response: httpx.Response) -> None:
    print(f"{label:<16} {response.status_code}  {response.text}")


async def run_scenario(
    base_url: str,
    caller: str,
    authority: str,
    name: str,
    expiry: int,
) -> dict:
    """Run the scenario and return the final product (or the error body).

    Args:
        base_url: Registry base URL (e.g., http://localhost:8080)
        caller: Identity sent in X-Caller
        authority: Identity to bind as fee recipient
        name: Product name to register
        expiry: Product expiry time

    Returns:
        Response JSON of the last call
    """
    headers = {"X-Caller": caller}

    print(f"\n{'='*60}")
    print(f"Caller:    {caller}")
    print(f"Authority: {authority}")
    print(f"Product:   {name}")
    print(f"{'='*60}\n")

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        response = await client.post("/authority", json={"identity": authority}, headers=headers)
        show("set authority", response)

        response = await client.post("/products", json=build_product(name, expiry), headers=headers)
        show("create", response)
        if response.status_code != 201:
            return {"error": response.json(), "status_code": response.status_code}
        product_id = response.json()["id"]

        response = await client.patch(
            f"/products/{product_id}",
            json={"name": f"{name}-v2", "max_quantity": 2000, "description": "Renamed"},
            headers=headers,
        )
        show("update", response)

        show("old name", await client.get("/products/exists", params={"name": name}))
        show("count", await client.get("/products/count"))
        show("audit record", await client.get(f"/products/{product_id}/update"))

        response = await client.get(f"/products/{product_id}")
        show("product", response)
        return {"success": response.status_code == 200, "product": response.json()}


async def check_health(base_url: str) -> bool:
    """Check if the registry is running and healthy."""
    try:
        async with httpx.AsyncClient(timeout=5.0) as client:
            response = await client.get(f"{base_url}/health")
            return response.status_code == 200
    except httpx.HTTPError as e:
        print(f"Health check failed: {e}")
        return False


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Simulate registry calls against a running service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--url",
        default="http://localhost:8080",
        help="Registry base URL (default: http://localhost:8080)",
    )
    parser.add_argument(
        "--caller",
        default="ST1TEST",
        help="Caller identity (default: ST1TEST)",
    )
    parser.add_argument(
        "--authority",
        default="ST2TEST",
        help="Authority identity to bind (default: ST2TEST)",
    )
    parser.add_argument(
        "--name",
        default="WidgetA",
        help="Product name (default: WidgetA)",
    )
    parser.add_argument(
        "--expiry",
        type=int,
        default=100000,
        help="Product expiry (default: 100000)",
    )
    parser.add_argument(
        "--skip-health",
        action="store_true",
        help="Skip health check before sending requests",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Save final response JSON to file",
    )

    return parser.parse_args()


async def main() -> int:
    """Main entry point."""
    args = parse_args()

    if not args.skip_health:
        print(f"Checking registry health at {args.url}...")
        if not await check_health(args.url):
            print("Error: registry is not healthy or not running")
            print("Make sure the server is running: uvicorn product_registry.main:app --port 8080")
            return 1
        print("Registry is healthy!\n")

    result = await run_scenario(
        base_url=args.url,
        caller=args.caller,
        authority=args.authority,
        name=args.name,
        expiry=args.expiry,
    )

    if args.output:
        args.output.write_text(json.dumps(result, indent=2, default=str))
        print(f"\nResponse saved to: {args.output}")

    if result.get("success"):
        print("\nScenario completed successfully!")
        return 0
    else:
        print("\nScenario failed!")
        return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
