"""Run the NewsDeck API server with uvicorn."""

from __future__ import annotations

import argparse
import logging
import os

import uvicorn

from .api import create_app
from .config import NewsDeckConfig


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="NewsDeck article browser server")
    parser.add_argument(
        "--data",
        default=os.environ.get("NEWSDECK_DATA_SOURCE", "articles.json"),
        help="Path or http(s) URL of the articles JSON document",
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("NEWSDECK_HOST", "127.0.0.1"),
        help="Host interface for the API",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.environ.get("PORT", "8780")),
        help="TCP port for the API",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
    app = create_app(config=NewsDeckConfig(data_source=args.data))
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
