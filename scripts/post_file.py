#!/usr/bin/env python3
"""
Post a local file to a running transform service and save or print the result.
Run: API must be running.
  python scripts/post_file.py users.json
  python scripts/post_file.py cat.jpg --output cat.png
  python scripts/post_file.py photo.jpeg --route /jpeg-to-png --base-url http://localhost:8080
"""

import argparse
import sys
from pathlib import Path

import httpx

API_BASE = "http://localhost:8080"

# File extension -> route
ROUTES = {
    ".json": "/json",
    ".jpg": "/jpeg-to-png",
    ".jpeg": "/jpeg-to-png",
}


def main():
    ap = argparse.ArgumentParser(description="POST a JSON or JPEG file to the transform API")
    ap.add_argument("path", type=Path, help="File to upload")
    ap.add_argument("--route", help="Route to call (default: picked from the file extension)")
    ap.add_argument("--output", type=Path, help="Write the response body here instead of stdout")
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    route = args.route or ROUTES.get(args.path.suffix.lower())
    if route is None:
        print(f"Cannot pick a route for {args.path.name}; pass --route", file=sys.stderr)
        sys.exit(2)

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        r = client.post(route, content=args.path.read_bytes())

    if r.status_code != 200:
        print(f"{route} failed with {r.status_code}:\n{r.text}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        args.output.write_bytes(r.content)
        print(f"Wrote {len(r.content)} bytes ({r.headers.get('content-type')}) to {args.output}")
    elif r.headers.get("content-type", "").startswith("image/"):
        sys.stdout.buffer.write(r.content)
    else:
        print(r.text)


if __name__ == "__main__":
    main()
