import argparse
import logging
import sys
from pathlib import Path

from utils import setup_logging
from healthdata import DashboardConfig, LoadError, load_document
from dashboard import DashboardBuilder

LOGGER = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build the health dashboard HTML page")
    parser.add_argument("--source", help="Path or http(s) URL of health_data.json")
    parser.add_argument("--output", help="Where to write the HTML page")
    parser.add_argument("--config", help="Configuration file (key = value lines)")
    parser.add_argument("--timeout", type=float, help="Fetch timeout in seconds (default: none)")
    parser.add_argument("--log-file", help="Log file path")
    return parser.parse_args(argv)


def resolve_config(args) -> DashboardConfig:
    if args.config:
        config = DashboardConfig.from_config_file(args.config)
    else:
        config = DashboardConfig.from_env()
    if args.source:
        config.data_source = args.source
    if args.output:
        config.output_path = args.output
    if args.timeout is not None:
        config.fetch_timeout = args.timeout
    if args.log_file:
        config.log_file = args.log_file
    return config


def write_page(path, page: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(page, encoding="utf-8")


def main(argv=None) -> int:
    args = parse_args(argv)
    config = resolve_config(args)
    setup_logging(config.log_file)

    builder = DashboardBuilder(config)
    try:
        document = load_document(config.data_source, timeout=config.fetch_timeout)
    except LoadError as e:
        LOGGER.error(f"Dashboard not built: {e}")
        write_page(config.output_path, builder.build_error_page(e))
        return 1

    write_page(config.output_path, builder.build(document))
    LOGGER.info(f"Dashboard written to {config.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
