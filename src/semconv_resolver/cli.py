"""
Command-line interface for the semantic convention registry resolver.

Provides commands for:
- Resolving a registry and printing it with its attribute catalog
- Checking that a registry resolves
- Showing statistics on a resolved registry
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from . import config as resolver_config
from .exporters.otlp_exporter import OTLP_PROTOCOLS, create_otlp_trace_exporter
from .exporters.provider import configure_tracer_provider
from .resolved.registry import Registry
from .resolver.attribute_catalog import AttributeCatalog
from .resolver.errors import InternalResolverError, ResolverError
from .resolver.registry import resolve_semconv_registry
from .schemas.group_spec import SemConvSpecError
from .schemas.registry_loader import SemConvRegistry
from .stats import compute_registry_stats

logger = logging.getLogger(__name__)


def _add_common_arguments(parser: argparse.ArgumentParser, suppress: bool = False) -> None:
    """Options accepted both before and after the subcommand."""

    def help_text(text: str) -> str:
        return argparse.SUPPRESS if suppress else text

    default = argparse.SUPPRESS if suppress else None
    parser.add_argument(
        "--registry",
        dest="registry",
        action="append",
        default=default,
        help=help_text(
            "Registry file or directory (repeatable; default: SEMCONV_REGISTRY)"
        ),
    )
    parser.add_argument(
        "--registry-url",
        type=str,
        default=default,
        help=help_text("Registry identifier recorded in the output (default: SEMCONV_REGISTRY_URL or the path)"),
    )
    parser.add_argument(
        "--no-lineage",
        action="store_true",
        default=default,
        help=help_text("Do not track group lineage (default: SEMCONV_RESOLVER_LINEAGE)"),
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="semconv-resolver",
        description="Resolve semantic convention registries (references, extends, constraints)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Resolve a registry directory and print it as YAML
  semconv-resolver resolve --registry model/

  # Check that a registry resolves
  semconv-resolver check --registry model/

  # Show statistics and ship resolver traces to an OTLP collector
  semconv-resolver --endpoint http://localhost:4318 stats --registry model/
        """,
    )

    _add_common_arguments(parser)
    parser.add_argument(
        "--endpoint",
        type=str,
        default=None,
        help="OTLP endpoint for resolver traces (default: OTEL_EXPORTER_OTLP_ENDPOINT; unset disables export)",
    )
    parser.add_argument(
        "--protocol",
        choices=OTLP_PROTOCOLS,
        default="http",
        help="OTLP protocol (default: http)",
    )
    parser.add_argument(
        "--console-traces",
        action="store_true",
        help="Print resolver spans to the console",
    )
    parser.add_argument(
        "--service-name",
        type=str,
        default=resolver_config.DEFAULT_SERVICE_NAME,
        help=f"Service name for resolver traces (default: {resolver_config.DEFAULT_SERVICE_NAME})",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level (default: SEMCONV_RESOLVER_LOG_LEVEL or WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a registry and print it")
    _add_common_arguments(resolve_parser, suppress=True)
    resolve_parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml)",
    )
    resolve_parser.add_argument(
        "--output-file",
        type=str,
        default=None,
        help="Write the resolved registry to this file instead of stdout",
    )

    check_parser = subparsers.add_parser("check", help="Check that a registry resolves")
    _add_common_arguments(check_parser, suppress=True)

    stats_parser = subparsers.add_parser("stats", help="Show statistics on a resolved registry")
    _add_common_arguments(stats_parser, suppress=True)

    return parser


def _resolve(args: argparse.Namespace) -> tuple[Registry, AttributeCatalog]:
    """Load and resolve the registry named by the arguments."""
    registry_paths = getattr(args, "registry", None)
    specs = SemConvRegistry.from_paths(registry_paths)
    registry_url = getattr(args, "registry_url", None) or resolver_config.get_registry_url(
        specs.registry_id
    )
    track_lineage = resolver_config.lineage_enabled() and not getattr(args, "no_lineage", False)

    attr_catalog = AttributeCatalog()
    registry = resolve_semconv_registry(attr_catalog, registry_url, specs, track_lineage=track_lineage)
    return registry, attr_catalog


def render_resolved(registry: Registry, attr_catalog: AttributeCatalog, output_format: str) -> str:
    """Serialize the resolved registry and the drained attribute catalog."""
    document: dict[str, Any] = {
        "catalog": [a.to_dict() for a in attr_catalog.drain_attributes()],
        "registry": registry.to_dict(),
    }
    if output_format == "json":
        return json.dumps(document, indent=2)
    return yaml.safe_dump(document, sort_keys=False, allow_unicode=True)


def cmd_resolve(args: argparse.Namespace) -> None:
    """Resolve a registry and print or write it."""
    registry, attr_catalog = _resolve(args)
    output = render_resolved(registry, attr_catalog, args.format)
    if args.output_file:
        path = Path(args.output_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(output, encoding="utf-8")
        print(f"Resolved registry written to {path}")
    else:
        print(output)


def cmd_check(args: argparse.Namespace) -> None:
    """Resolve a registry and report the outcome."""
    registry, attr_catalog = _resolve(args)
    print("Registry resolved successfully")
    print(f"   Registry: {registry.registry_url}")
    print(f"   Groups: {len(registry.groups)}")
    print(f"   Attributes: {len(attr_catalog)}")


def cmd_stats(args: argparse.Namespace) -> None:
    """Resolve a registry and print statistics."""
    registry, attr_catalog = _resolve(args)
    print(compute_registry_stats(registry, attr_catalog))


def _configure_tracing(args: argparse.Namespace):
    endpoint = args.endpoint or resolver_config.get_otlp_endpoint()
    if endpoint:
        return configure_tracer_provider(
            create_otlp_trace_exporter(endpoint, protocol=args.protocol),
            service_name=args.service_name,
        )
    if args.console_traces:
        return configure_tracer_provider(None, service_name=args.service_name)
    return None


_COMMANDS = {
    "resolve": cmd_resolve,
    "check": cmd_check,
    "stats": cmd_stats,
}


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=(args.log_level or resolver_config.get_log_level()).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    provider = _configure_tracing(args)

    exit_code = 0
    try:
        _COMMANDS[args.command](args)
    except (FileNotFoundError, SemConvSpecError) as e:
        print(f"Failed to load registry: {e}")
        exit_code = 1
    except InternalResolverError as e:
        logger.error("Internal resolver error: %s", e)
        print(f"Internal error: {e}")
        exit_code = 1
    except ResolverError as e:
        print(f"Failed to resolve registry:\n{e}")
        exit_code = 1
    finally:
        if provider is not None:
            provider.shutdown()

    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
