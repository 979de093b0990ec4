"""
Link Checker CLI entry point.

Runs the MCP server (the default) and offers one-off checks from a shell.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from linkchecker import __version__
from linkchecker.checks import check_link
from linkchecker.config.logging import get_logger, setup_logging
from linkchecker.config.settings import ProbeSettings, Settings, load_settings


def _positive_float(value: str) -> float:
    """argparse type for timeouts: a number greater than zero."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}")
    if not number > 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0, got {value}")
    return number


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="linkchecker",
        description="MCP tool server that checks whether a URL is reachable",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Link Checker {__version__}",
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to .env file (default: .env in current directory)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override logging level from config",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "serve",
        help="Run the MCP server over stdio (default)",
    )

    subparsers.add_parser(
        "config",
        help="Show current configuration",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Check a single URL and print the result",
    )
    check_parser.add_argument(
        "url",
        help='URL to check, e.g. "https://example.com"',
    )
    check_parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help="Probe timeout in seconds (default: PROBE__TIMEOUT_S from config)",
    )
    check_parser.add_argument(
        "--get-fallback",
        action="store_true",
        help="Retry with GET when the server rejects HEAD (405/501)",
    )
    check_parser.add_argument(
        "--via-server",
        action="store_true",
        help="Spawn the MCP server and run the check through it",
    )

    return parser


def cmd_config(settings: Settings) -> int:
    """Show current configuration."""
    logger = get_logger(__name__)

    logger.info("\n=== Link Checker Configuration ===\n")
    logger.info(f"Log Level: {settings.log_level}")
    logger.info(f"Log File: {settings.log_file or 'None (console only)'}")
    logger.info(f"\nServer Name: {settings.server.name}")
    logger.info(f"Server Version: {settings.server.version}")
    logger.info(f"\nProbe Timeout: {settings.probe.timeout_s:g}s")
    logger.info(f"Follow Redirects: {settings.probe.follow_redirects}")
    logger.info(f"User-Agent: {settings.probe.user_agent}")
    logger.info(f"GET Fallback: {settings.probe.get_fallback}")

    return 0


def cmd_serve(settings: Settings) -> int:
    """Run the MCP server until the host disconnects."""
    from linkchecker.server import serve

    asyncio.run(serve(settings))
    return 0


def _server_env(settings: Settings, probe_settings: ProbeSettings) -> dict[str, str]:
    """Environment that gives a spawned server the same probe configuration."""
    env = {"LOG_LEVEL": settings.log_level}
    for name, value in probe_settings.model_dump().items():
        env[f"PROBE__{name.upper()}"] = str(value).lower() if isinstance(value, bool) else str(value)
    return env


async def cmd_check(args, settings: Settings) -> int:
    """
    Check one URL and print the result message.

    Returns:
        0 when the probe completed (any HTTP status), 1 on network failure,
        invalid input or a server that could not be started
    """
    probe_settings = settings.probe
    overrides = {}
    if args.timeout is not None:
        overrides["timeout_s"] = args.timeout
    if args.get_fallback:
        overrides["get_fallback"] = True
    if overrides:
        probe_settings = ProbeSettings.model_validate(
            {**probe_settings.model_dump(), **overrides}
        )

    if args.via_server:
        from linkchecker.client import LinkCheckerClient

        try:
            async with LinkCheckerClient(env=_server_env(settings, probe_settings)) as client:
                result = await client.call("check_link", {"url": args.url})
        except Exception as e:
            print(f"Link checker server failed: {e}", file=sys.stderr)
            return 1
        print(result["text"])
        return 1 if result["is_error"] else 0

    result = await check_link(args.url, probe_settings)
    print(result.message)
    return 1 if result.is_error else 0


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    # Load settings
    try:
        settings = load_settings(env_file=args.env_file)
    except Exception as e:
        print(f"Error loading settings: {e}", file=sys.stderr)
        return 1

    # Override log level if specified
    if args.log_level:
        settings.log_level = args.log_level

    setup_logging(settings)

    if args.command == "config":
        return cmd_config(settings)
    elif args.command == "check":
        return asyncio.run(cmd_check(args, settings))
    else:
        # Default: serve, which is how MCP hosts launch the process
        return cmd_serve(settings)


if __name__ == "__main__":
    sys.exit(main())
