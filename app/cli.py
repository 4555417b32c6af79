"""
CLI entry point for running the services.

Usage:
    # Serve the bicycle and boat resource endpoints
    python -m app.cli resources --port 3000

    # Serve the boat aggregation gateway
    python -m app.cli aggregator --port 3001
"""

import argparse
import logging

from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)

APPS = {
    "resources": "app.main:app",
    "aggregator": "app.main:aggregator_app",
}


def cmd_serve(args: argparse.Namespace) -> None:
    """Run one of the applications under uvicorn."""
    import uvicorn

    logger.info(
        "Starting %s service at http://%s:%d", args.command, args.host, args.port
    )
    uvicorn.run(APPS[args.command], host=args.host, port=args.port, reload=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vehicle Services CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, default_port in (("resources", 3000), ("aggregator", 3001)):
        sub = subparsers.add_parser(name, help=f"Serve the {name} API")
        sub.add_argument("--host", default="127.0.0.1")
        sub.add_argument("--port", type=int, default=default_port)
        sub.set_defaults(func=cmd_serve)

    return parser


def main() -> None:
    configure_logging()
    args = build_parser().parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
