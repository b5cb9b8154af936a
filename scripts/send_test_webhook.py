#!/usr/bin/env python3
from __future__ import annotations

import argparse
import time

import httpx
from httpx import ConnectError


def build_form(sender: str, recipient: str, text: str) -> dict[str, str]:
    now_ms = int(time.time() * 1000)
    return {
        "MessageSid": f"SM{now_ms}",
        "From": sender,
        "To": recipient,
        "Body": text,
        "NumMedia": "0",
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Send a Twilio-style inbound message webhook")
    parser.add_argument("--url", default="http://127.0.0.1:3001/api/incoming-message")
    parser.add_argument("--sender", default="whatsapp:+919000000001", help="Driver identity to reply as")
    parser.add_argument("--recipient", default="whatsapp:+14155238886")
    parser.add_argument("--text", default="I have reached the pickup point.")
    args = parser.parse_args()

    form = build_form(args.sender, args.recipient, args.text)

    try:
        resp = httpx.post(args.url, data=form, timeout=10.0)
    except ConnectError:
        print("Connection refused. Is the FastAPI server running?")
        print("Try: uvicorn app.main:app --reload --port 3001")
        return

    print(resp.status_code)
    if resp.text:
        print(resp.text)


if __name__ == "__main__":
    main()
