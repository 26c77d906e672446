#!/usr/bin/env python3
"""
Walk the supply request wizard against a running API: start a draft, fill the
contact, demand and summary screens, then submit.

Start the API first (in another terminal):
  INTEGRATIONS_MODE=mock uvicorn src.api.main:app --host 127.0.0.1 --port 8000

Then run this script:
  python scripts/run_request_wizard.py
  python scripts/run_request_wizard.py --base-url http://127.0.0.1:8000 --no-submit
"""

from __future__ import annotations

import argparse
import sys
from typing import Any, Dict, Optional

import httpx


CONTACT = {
    "name": "Szpital Miejski",
    "city": "Warszawa",
    "street": "Lipowa",
    "building": "12",
    "apartment": "",
    "postalCode": "00-950",
    "email": "zaopatrzenie@szpital.example",
    "phone": "+48221234567",
}

DEMAND = {
    "supplies": {
        "Mask": {"positions": [{"type": "medical", "quantity": 0, "style": "FFP2"}]},
        "Glove": {"positions": [{"quantity": 200, "material": "nitrile", "size": "M"}]},
        "Transport": {"description": "Deliveries on weekdays before noon"},
    }
}


def call(client: httpx.Client, method: str, url: str, data: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    r = client.request(method, url, json=data)
    r.raise_for_status()
    return r.json()


def main() -> int:
    parser = argparse.ArgumentParser(description="Fill and submit a supply request through the wizard API")
    parser.add_argument("--base-url", default="http://localhost:8000", help="API base URL")
    parser.add_argument("--comment", default="Thank you!", help="Closing comment on the summary screen")
    parser.add_argument("--no-submit", action="store_true", help="Stop after the summary screen")
    args = parser.parse_args()
    base = args.base_url.rstrip("/") + "/api/v1/request-forms"

    print("=== Supply request wizard ===\n")
    print(f"Base URL: {args.base_url}\n")

    with httpx.Client(timeout=30) as client:
        print("1) POST /request-forms/start")
        try:
            draft = call(client, "POST", f"{base}/start")
        except httpx.HTTPError as e:
            print(f"   FAIL: {e}")
            if isinstance(e, httpx.ConnectError):
                print("   → Start the API first: uvicorn src.api.main:app --host 127.0.0.1 --port 8000")
            return 1
        draft_id = draft["draft_id"]
        print(f"   draft_id: {draft_id}\n")

        screens = [("contact", CONTACT), ("demand", DEMAND), ("summary", {"comment": args.comment})]
        for n, (step_type, body) in enumerate(screens, start=2):
            print(f"{n}) PUT /request-forms/{{draft_id}}/steps/{step_type}")
            try:
                out = call(client, "PUT", f"{base}/{draft_id}/steps/{step_type}", body)
            except httpx.HTTPStatusError as e:
                print(f"   FAIL: {e}\n   body: {e.response.text[:500]}")
                return 1
            print(f"   prev={out['prev_path']} next={out['next_path']} complete={out['complete']}\n")

        if args.no_submit:
            print("=== Draft left unsubmitted ===")
            return 0

        print("5) POST /request-forms/{draft_id}/submit")
        try:
            out = call(client, "POST", f"{base}/{draft_id}/submit")
        except httpx.HTTPStatusError as e:
            print(f"   FAIL: {e}\n   body: {e.response.text[:500]}")
            return 1
        print(f"   id: {out['id']}")
        print(f"   sections: {', '.join(out['sections'])}\n")

    print("=== All steps completed successfully ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
