"""Wine cellar server control script.

Usage:
    winecellar-server start [--host HOST] [--port PORT] [--reload]
    winecellar-server status [--port PORT]
"""

import argparse
import json
import sys
import urllib.error
import urllib.request

import uvicorn

from winecellar.config import get_settings

APP_PATH = "winecellar.main:app"


def start_server(host: str, port: int, reload: bool = False, log_level: str = "info") -> bool:
    """Start the server in the foreground.

    Args:
        host: Host to bind to
        port: Port to bind to
        reload: Enable auto-reload for development
        log_level: uvicorn log level

    Returns:
        True once the server has shut down cleanly
    """
    print(f"Starting Wine Cellar server on http://{host}:{port}")
    print("Press Ctrl+C to stop the server")
    uvicorn.run(APP_PATH, host=host, port=port, reload=reload, log_level=log_level)
    return True


def server_status(port: int) -> bool:
    """Print the server status from its health endpoint.

    Returns:
        True if the server answered
    """
    try:
        with urllib.request.urlopen(f"http://localhost:{port}/health", timeout=2) as response:
            data = json.loads(response.read().decode())
    except (urllib.error.URLError, OSError):
        print("Wine Cellar server is not running")
        return False

    print("Wine Cellar server is running")
    print(f"  Status: {data.get('status', 'unknown')}")
    print(f"  Version: {data.get('version', 'unknown')}")
    return True


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser, defaulting host and port from configuration."""
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Wine Cellar server control script",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s start                  Start server on the configured port
  %(prog)s start --port 8080      Start server on port 8080
  %(prog)s start --reload         Start with auto-reload for development
  %(prog)s status                 Check server status
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    start_parser = subparsers.add_parser("start", help="Start the server")
    start_parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    start_parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    start_parser.add_argument(
        "--reload", "-r",
        action="store_true",
        help="Enable auto-reload for development",
    )
    start_parser.add_argument(
        "--log-level",
        default=settings.log_level.lower(),
        choices=["critical", "error", "warning", "info", "debug"],
        help="uvicorn log level",
    )

    status_parser = subparsers.add_parser("status", help="Check server status")
    status_parser.add_argument(
        "--port", "-p",
        type=int,
        default=settings.port,
        help=f"Port the server listens on (default: {settings.port})",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        if args.command == "start":
            success = start_server(
                host=args.host,
                port=args.port,
                reload=args.reload,
                log_level=args.log_level,
            )
            return 0 if success else 1

        elif args.command == "status":
            return 0 if server_status(args.port) else 1

    except KeyboardInterrupt:
        print("\nInterrupted")
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
