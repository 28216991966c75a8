"""Command line entry point for NJ TRANSIT departures."""

import argparse
import asyncio
import logging
import smtplib
import sys

import aiohttp
from rich.console import Console

from njt_departures import __version__
from njt_departures.adapters.config import AppConfig
from njt_departures.adapters.console.board_formatter import (
    format_board,
    format_destination_candidates,
    format_station_list,
    format_stops,
)
from njt_departures.adapters.njt_html import DocumentCache, NjtHttpClient, NjtScheduleRepository
from njt_departures.adapters.notification import EmailNotifier
from njt_departures.adapters.station_directory import StaticStationDirectory
from njt_departures.application.services import UpcomingTrainsService
from njt_departures.domain.errors import DeparturesError, DisambiguationRequiredError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_DISAMBIGUATION = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(config: AppConfig) -> None:
    """Log warnings to stderr, and everything to the debug log file when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stderr,
    )
    if config.verbose:
        # stderr stays quiet; the detail goes to the debug log
        for handler in logging.getLogger().handlers:
            handler.setLevel(logging.WARNING)
        file_handler = logging.FileHandler(config.debug_log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(file_handler)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="njt-departures",
        description="Next NJ TRANSIT trains and their status at previous stops",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List station codes
  njt-departures --list

  # Next trains from Newark Penn Station to New York
  njt-departures -f NP -t NY

  # Full departure board of Secaucus
  njt-departures -f SE --all

  # Stops of train 3855 as seen from Newark Penn Station
  njt-departures -f NP -p 3855
        """,
    )
    parser.add_argument("-l", "--list", action="store_true", help="list stations")
    parser.add_argument(
        "-f", "--from", dest="origin", metavar="STATION", help="get next departure and train status"
    )
    parser.add_argument(
        "-t", "--to", dest="destination", metavar="STATION", help="set destination station"
    )
    parser.add_argument(
        "-a", "--all", action="store_true", help="get all departures for station"
    )
    parser.add_argument("-p", "--stops", metavar="TRAIN", help="get stops for train")
    parser.add_argument(
        "-m", "--mail", action="store_true", help="send email with nearest departure"
    )
    parser.add_argument("-d", "--debug", action="store_true", help="output debug information")
    parser.add_argument(
        "-s", "--debug-server", action="store_true", help="use debug server"
    )
    parser.add_argument(
        "-v", "--version", action="version", version=f"departures\nversion {__version__}"
    )
    return parser


def load_config(args: argparse.Namespace) -> AppConfig:
    """Build the configuration from environment, TOML file and command line flags."""
    config = AppConfig()
    config.load_toml_overrides()
    if args.debug:
        config.verbose = True
    if args.debug_server:
        config.use_alternate_source = True
    return config


async def _send_report(config: AppConfig, report: str) -> None:
    if not config.mail_from or not config.mail_to:
        raise ValueError("mail_from and mail_to must be configured to send e-mail")
    notifier = EmailNotifier(
        sender=config.mail_from,
        recipient=config.mail_to,
        host=config.smtp_host,
        port=config.smtp_port,
        username=config.smtp_username,
        password=config.smtp_password,
        use_tls=config.smtp_use_tls,
    )
    await notifier.send(config.mail_subject, report)


async def run(args: argparse.Namespace, config: AppConfig) -> int:
    """Execute the requested command and return the process exit code."""
    directory = StaticStationDirectory()

    if args.list:
        print(format_station_list(directory.list_stations()), end="")
        return EXIT_OK

    if not args.origin:
        print("Origin station is not specified", file=sys.stderr)
        return EXIT_ERROR

    options = config.query_options()
    cache = DocumentCache(config.cache_dir, config.cache_ttl_seconds)

    async with aiohttp.ClientSession() as session:
        client = NjtHttpClient(
            session,
            cache,
            timeout_seconds=config.request_timeout_seconds,
            min_delay_seconds=config.min_request_delay_seconds,
        )
        repository = NjtScheduleRepository(
            client,
            directory,
            options,
            live_base_url=config.live_base_url,
            alternate_base_url=config.alternate_base_url,
        )
        service = UpcomingTrainsService(repository, directory, options)

        if args.all:
            Console(highlight=False).print(format_board(await service.get_board(args.origin)))
            return EXIT_OK

        if args.stops:
            print(format_stops(await service.get_train_stops(args.origin, args.stops)), end="")
            return EXIT_OK

        try:
            report = await service.get_upcoming_report(args.origin, args.destination)
        except DisambiguationRequiredError as e:
            print(format_destination_candidates(e.candidates), end="")
            return EXIT_DISAMBIGUATION

    print(report, end="")

    if args.mail:
        try:
            await _send_report(config, report)
        except (ValueError, smtplib.SMTPException, OSError) as e:
            logger.error(f"Cannot send report: {e}")
            return EXIT_ERROR

    return EXIT_OK


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        parser.print_usage()
        return EXIT_ERROR

    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(config)

    try:
        return await run(args, config)
    except DeparturesError as e:
        logger.error(str(e))
        return EXIT_ERROR


def cli_main() -> None:
    """Synchronous entry point for the console script."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    cli_main()
