"""CLI entry point for the forecast harness."""

import argparse
import asyncio
import json
import logging

import yaml
from pydantic import ValidationError

from apimsample.client.forecast_client import ForecastClient
from apimsample.client.http import build_http_client
from apimsample.config.loader import get_config_value, load_config, masked_dump
from apimsample.config.schema import AppConfig
from apimsample.models.common import ApiSource
from apimsample.models.fetch import FetchResult

DEFAULT_CONFIG = "ops/configs/default.yaml"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORTS = {"backend": 5000, "frontend": 5001}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="apimsample",
        description="Call the weather API directly, through the gateway, or via the front-end",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )

    sub = parser.add_subparsers(dest="command")

    # fetch
    fetch_p = sub.add_parser("fetch", help="Fetch forecasts from one source")
    fetch_p.add_argument(
        "source", nargs="?", choices=[s.value for s in ApiSource]
    )
    fetch_p.add_argument(
        "--all", action="store_true", help="Fetch from every source concurrently"
    )

    # config show / config get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Get a config value")
    get_p.add_argument("key", help="Dotted key, e.g. api.base_url")

    # serve
    serve_p = sub.add_parser("serve", help="Run the backend or front-end app")
    serve_p.add_argument("app", choices=sorted(DEFAULT_PORTS))
    serve_p.add_argument("--host", default=DEFAULT_HOST)
    serve_p.add_argument("--port", type=int)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, yaml.YAMLError, TypeError, ValidationError) as e:
        print(f"Error: invalid config {args.config}: {e}")
        return 1

    if args.command == "fetch":
        return _cmd_fetch(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_fetch(config: AppConfig, args) -> int:
    if args.all:
        sources = list(ApiSource)
    elif args.source:
        sources = [ApiSource(args.source)]
    else:
        print("Error: give a source or --all")
        return 1

    results = asyncio.run(fetch_all(config, sources))
    payload = [r.to_dict() for r in results]
    print(json.dumps(payload if args.all else payload[0], indent=2))
    return 0 if all(r.success for r in results) else 1


async def fetch_all(config: AppConfig, sources: list[ApiSource], **client_kwargs) -> list[FetchResult]:
    """Fetch every source concurrently over one pooled client."""
    async with build_http_client(config.api, **client_kwargs) as http:
        client = ForecastClient(http, config.api)
        return list(await asyncio.gather(*(client.fetch(s) for s in sources)))


def _cmd_config(config: AppConfig, args) -> int:
    if args.config_command == "show":
        print(json.dumps(masked_dump(config), indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(masked_dump(config), args.key)
        except KeyError as e:
            print(f"Error: {e.args[0]}")
            return 1
        print(json.dumps(value, indent=2) if isinstance(value, dict) else value)
        return 0
    else:
        print("Error: use 'config show' or 'config get <key>'")
        return 1


def _cmd_serve(config: AppConfig, args) -> int:
    import uvicorn

    from apimsample.backend.app import create_backend_app
    from apimsample.frontend.app import create_frontend_app

    if args.app == "backend":
        app = create_backend_app(config)
    else:
        app = create_frontend_app(config)
    uvicorn.run(app, host=args.host, port=args.port or DEFAULT_PORTS[args.app])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
