# bloggen/scripts/generate_blogs.py
"""
Generate posts from a JSON file without going through HTTP.

The file holds either a list of {title, details} objects or {"blogs": [...]}.
Items are generated one at a time and the stored records are printed as JSON.
"""
import argparse
import json
import os
import sys
from typing import Any, Dict, List

from bloggen import create_app
from bloggen.generator import generate_blog


def load_items(path: str) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        raw = json.load(f)
    if isinstance(raw, dict):
        raw = raw.get("blogs")
    if not isinstance(raw, list):
        raise ValueError("expected a list of { title, details } or {\"blogs\": [...]}")
    return [b if isinstance(b, dict) else {} for b in raw]


def run(items: List[Dict[str, Any]], app=None) -> List[Dict[str, Any]]:
    app = app or create_app()
    out = []
    with app.app_context():
        for b in items:
            post = generate_blog(b.get("title"), b.get("details"))
            out.append(post.to_dict())
    return out


def main(argv=None, app=None) -> int:
    p = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    p.add_argument("path", help="JSON file with blog topics")
    args = p.parse_args(argv)

    if not os.path.exists(args.path):
        print(f"File not found: {args.path}", file=sys.stderr)
        return 1
    try:
        items = load_items(args.path)
    except ValueError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 1

    print(json.dumps(run(items, app=app), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
