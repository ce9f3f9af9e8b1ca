"""
Command line access to persisted behavioral intelligence data

Reads the snapshots written by a running application from the configured
store and prints insights, reports and journeys as JSON.
"""

import argparse
import json
import sys
from typing import List, Optional

from lead_intel.core.config import Settings
from lead_intel.core.config.settings import LoggingSettings, StorageSettings
from lead_intel.core.exceptions import LeadIntelException
from lead_intel.core.logging import LoggingConfig, get_logger, setup_logging
from lead_intel.core.messaging import NullTagSink
from lead_intel.domains.intelligence import BehavioralIntelligence
from lead_intel.shared.constants.app import PROJECT_NAME, STORAGE_BACKENDS, VERSION

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROJECT_NAME,
        description="Inspect persisted behavioral learning and attribution data",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "--backend", choices=STORAGE_BACKENDS, help="Storage backend to read from"
    )
    parser.add_argument("--directory", help="Snapshot directory for the file backend")
    parser.add_argument("--scope", help="Storage scope (one per site or tenant)")
    parser.add_argument("--log-level", default=None, help="Log level (default: settings)")
    parser.add_argument(
        "--format",
        choices=["console", "json"],
        default=None,
        help="Log output format",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("insights", help="Print the learned user profile")
    subparsers.add_parser("report", help="Print the full analytics report")

    journey = subparsers.add_parser("journey", help="Print one session's events")
    journey.add_argument(
        "session_id", nargs="?", help="Session id (default: the stored session)"
    )

    recommendations = subparsers.add_parser(
        "recommendations", help="Print ranked recommendations"
    )
    recommendations.add_argument("--type", dest="recommendation_type", default=None)

    subparsers.add_parser("diagnostics", help="Print engine health counters")
    subparsers.add_parser("reset", help="Delete both stored snapshots")
    return parser


def build_settings(args: argparse.Namespace) -> Settings:
    storage_overrides = {}
    if args.backend:
        storage_overrides["BACKEND"] = args.backend
    if args.directory:
        storage_overrides["DIRECTORY"] = args.directory
    if args.scope:
        storage_overrides["SCOPE"] = args.scope

    logging_overrides = {}
    if args.log_level:
        logging_overrides["LEVEL"] = args.log_level.upper()
    if args.format:
        logging_overrides["FORMAT"] = args.format

    cli_settings = Settings(
        storage=StorageSettings(**storage_overrides),
        logging=LoggingSettings(**logging_overrides),
    )
    cli_settings.validate_configuration()
    return cli_settings


def _dump(model) -> str:
    return model.model_dump_json(by_alias=True, indent=2)


def run(args: argparse.Namespace, out=None) -> int:
    out = out or sys.stdout
    cli_settings = build_settings(args)
    setup_logging(LoggingConfig.from_settings(cli_settings.logging))

    service = BehavioralIntelligence(settings=cli_settings, sink=NullTagSink())

    if args.command == "insights":
        print(_dump(service.get_user_insights()), file=out)
    elif args.command == "report":
        print(_dump(service.get_analytics_report()), file=out)
    elif args.command == "journey":
        journey = service.get_user_journey(args.session_id)
        payload = [event.model_dump(mode="json", by_alias=True) for event in journey]
        print(json.dumps(payload, indent=2), file=out)
    elif args.command == "recommendations":
        ranked = service.get_personalized_recommendations(args.recommendation_type)
        payload = [rec.model_dump(mode="json", by_alias=True) for rec in ranked]
        print(json.dumps(payload, indent=2), file=out)
    elif args.command == "diagnostics":
        payload = {
            name: report.model_dump(mode="json")
            for name, report in service.diagnostics().items()
        }
        print(json.dumps(payload, indent=2), file=out)
    elif args.command == "reset":
        service.reset()
        logger.info("Stored snapshots removed", scope=cli_settings.storage.SCOPE)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except LeadIntelException as e:
        logger.error("Command failed", error=e.message, error_code=e.error_code)
        return 2


if __name__ == "__main__":
    sys.exit(main())
