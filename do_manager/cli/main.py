#!/usr/bin/env python3
"""
DigitalOcean Resource Manager - Command Line Interface

Main entry point for the do-manager CLI.
"""

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from ..core.command import CmdConfig
from ..core.domain_commands import (
    run_domain_create,
    run_domain_delete,
    run_domain_get,
    run_domain_list,
    run_record_create,
    run_record_delete,
    run_record_list,
    run_record_update,
)
from ..core.errors import ConfigurationError, DOManagerError
from ..core.region_commands import run_region_list
from ..display.displayer import OUTPUT_FORMATS, Displayer
from ..services.service_client import BACKENDS, ServiceClient
from ..utils.validators import parse_int

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "do-manager" / "config.yaml"
TOKEN_ENV_VAR = "DIGITALOCEAN_ACCESS_TOKEN"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def main():
    """Main CLI entry point."""
    sys.exit(run())


def run(argv: Optional[List[str]] = None, client=None, console=None) -> int:
    """Parse ``argv``, run the selected command and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
        apply_overrides(config, args)
        config_logger(config, verbose=args.verbose)

        displayer = Displayer(
            output=config["output"],
            no_header=args.no_header,
            columns=args.format.split(",") if args.format else None,
            console=console,
        )
        if client is None:
            client = ServiceClient(config)

        c = CmdConfig(args.ns, args.args, vars(args), client, displayer)
        logger.debug(f"Running {args.ns} with args {c.args}")
        args.func(c)
        return 0

    except DOManagerError as e:
        logger.debug(f"{args.ns} failed: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1
    except Exception as e:
        logger.error(f"Unexpected error in {args.ns}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the whole command tree."""
    parser = argparse.ArgumentParser(
        prog="do-manager",
        description="DigitalOcean Resource Manager - manage domains, records and regions",
    )
    parser.add_argument(
        "--config",
        "-c",
        help=f"Configuration file path (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--access-token",
        "-t",
        help=f"API access token (default: ${TOKEN_ENV_VAR} or config file)",
    )
    parser.add_argument(
        "--backend", choices=BACKENDS, help="Service backend to use (default: api)"
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )

    output_options = argparse.ArgumentParser(add_help=False)
    output_options.add_argument(
        "--output", "-o", choices=OUTPUT_FORMATS, help="Output format (default: text)"
    )
    output_options.add_argument(
        "--format", help="Comma separated columns to display, e.g. ID,Type,Data"
    )
    output_options.add_argument(
        "--no-header", action="store_true", help="Hide column headers"
    )

    commands = parser.add_subparsers(dest="command", metavar="COMMAND")
    commands.required = True

    domain = commands.add_parser("domain", help="domain commands")
    domain_commands = domain.add_subparsers(dest="domain_command", metavar="COMMAND")
    domain_commands.required = True

    create = _add_command(
        domain_commands, "create", run_domain_create, "domain.create",
        "create domain", ["c"], output_options, usage_args="<domain>",
    )
    create.add_argument("--ip-address", dest="ip_address", default="", help="IP address")

    _add_command(
        domain_commands, "list", run_domain_list, "domain.list",
        "list domains", ["ls"], output_options,
    )
    _add_command(
        domain_commands, "get", run_domain_get, "domain.get",
        "get domain", ["g"], output_options, usage_args="<domain>",
    )
    _add_command(
        domain_commands, "delete", run_domain_delete, "domain.delete",
        "delete domain", ["d", "rm"], output_options, usage_args="<domain>",
    )

    records = domain_commands.add_parser("records", help="domain record commands")
    record_commands = records.add_subparsers(dest="record_command", metavar="COMMAND")
    record_commands.required = True

    _add_command(
        record_commands, "list", run_record_list, "domain.records.list",
        "list records", ["ls"], output_options, usage_args="<domain>",
    )
    record_create = _add_command(
        record_commands, "create", run_record_create, "domain.records.create",
        "create record", ["c"], output_options, usage_args="<domain>",
    )
    _add_record_flags(record_create)

    record_update = _add_command(
        record_commands, "update", run_record_update, "domain.records.update",
        "update record", ["u"], output_options, usage_args="<domain>",
    )
    record_update.add_argument("--record-id", dest="record_id", type=int_flag, default=0, help="Record ID")
    _add_record_flags(record_update)

    _add_command(
        record_commands, "delete", run_record_delete, "domain.records.delete",
        "delete record", ["d", "rm"], output_options, usage_args="<domain> <record id...>",
    )

    region = commands.add_parser("region", help="region commands")
    region_commands = region.add_subparsers(dest="region_command", metavar="COMMAND")
    region_commands.required = True
    _add_command(
        region_commands, "list", run_region_list, "region.list",
        "list regions", ["ls"], output_options,
    )

    return parser


def _add_command(
    subparsers, name, func, ns, help_text, aliases, output_options, usage_args=""
) -> argparse.ArgumentParser:
    """Add a leaf command whose positional arguments are checked by its handler."""
    command = subparsers.add_parser(
        name, aliases=aliases, help=help_text, parents=[output_options]
    )
    # Argument counts are enforced by the handlers so that they fail
    # before any remote call with a consistent error.
    command.add_argument(
        "args", nargs="*", metavar="ARGS", help=usage_args or "no arguments"
    )
    command.set_defaults(func=func, ns=ns)
    return command


def int_flag(value: str) -> int:
    """argparse type for integer flags, rejecting forms like 1_0 or +5."""
    try:
        return parse_int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")


def _add_record_flags(command: argparse.ArgumentParser):
    command.add_argument("--record-type", dest="record_type", default="", help="Record type")
    command.add_argument("--record-name", dest="record_name", default="", help="Record name")
    command.add_argument("--record-data", dest="record_data", default="", help="Record data")
    command.add_argument("--record-priority", dest="record_priority", type=int_flag, default=0, help="Record priority")
    command.add_argument("--record-port", dest="record_port", type=int_flag, default=0, help="Record port")
    command.add_argument("--record-weight", dest="record_weight", type=int_flag, default=0, help="Record weight")


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load configuration from YAML file on top of the defaults."""
    config = get_default_config()
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    try:
        with open(path, "r") as f:
            loaded = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {path}")
    except FileNotFoundError:
        if config_path:
            raise ConfigurationError(f"Configuration file '{config_path}' not found")
        logger.debug(f"Config file {path} not found, using defaults")
        return config
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Error parsing config file {path}: {e}")

    if not isinstance(loaded, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    config.update(loaded)
    return config


def get_default_config() -> Dict:
    """Return default configuration."""
    return {
        "access_token": "",
        "api_url": "https://api.digitalocean.com/v2",
        "timeout": 30,
        "default_backend": "api",
        "output": "text",
        "logging": {"level": "WARNING"},
    }


def apply_overrides(config: Dict, args: argparse.Namespace) -> Dict:
    """Apply environment and command line settings over the loaded config."""
    env_token = os.environ.get(TOKEN_ENV_VAR)
    if env_token:
        config["access_token"] = env_token
    if args.access_token:
        config["access_token"] = args.access_token
    if args.backend:
        config["default_backend"] = args.backend
    if getattr(args, "output", None):
        config["output"] = args.output
    return config


def config_logger(config: Dict, verbose: bool = False):
    """Configure logging."""
    logging_config = config.get("logging") or {}
    log_level = "DEBUG" if verbose else logging_config.get("level", "WARNING")

    handlers = [logging.StreamHandler(sys.stderr)]
    log_file = logging_config.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(level=log_level, format=LOG_FORMAT, handlers=handlers)


if __name__ == "__main__":
    main()
