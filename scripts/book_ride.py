#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json

import httpx
from httpx import ConnectError


def main() -> None:
    parser = argparse.ArgumentParser(description="Post a sample booking to a running relay")
    parser.add_argument("--url", default="http://127.0.0.1:3001/api/book-ride")
    parser.add_argument("--name", default="Test Customer")
    parser.add_argument("--phone", default="+919812345678")
    parser.add_argument("--payment", default="Cash", choices=["Online", "Cash"])
    parser.add_argument("--pickup", default="MG Road, Bengaluru")
    parser.add_argument("--duration", type=float, default=2)
    parser.add_argument("--lat", type=float, default=None)
    parser.add_argument("--lon", type=float, default=None)
    args = parser.parse_args()

    payload = {
        "name": args.name,
        "phone": args.phone,
        "paymentMethod": args.payment,
        "pickup": args.pickup,
        "duration": args.duration,
    }
    if args.lat is not None or args.lon is not None:
        payload["coordinates"] = {"lat": args.lat, "lon": args.lon}

    try:
        resp = httpx.post(args.url, json=payload, timeout=30.0)
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn app.main:app --reload --port 3001")
        return

    print(resp.status_code)
    print(json.dumps(resp.json(), indent=2))


if __name__ == "__main__":
    main()
