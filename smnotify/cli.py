"""smnotify CLI: drive one lifecycle step from the command line.

Usage examples::

    smnotify create --attrs '{"instance_id": "...", "event_notifications_instance_crn": "crn:v1:...",
                              "event_notifications_source_name": "sm"}'
    smnotify read --id us-south/<instance_id>
    smnotify delete --id us-south/<instance_id>
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import Any

from smnotify.base.exceptions import SmNotifyError
from smnotify.factory import resource_factory
from smnotify.ibm.factory import RESOURCE_REGISTRY


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the ``smnotify`` CLI.

    Returns:
        Configured :class:`~argparse.ArgumentParser`.
    """
    parser = argparse.ArgumentParser(
        prog="smnotify",
        description="Manage Secrets Manager Event Notifications registrations",
    )
    parser.add_argument(
        "--resource", "-r",
        default="ibm_sm_en_registration",
        choices=sorted(RESOURCE_REGISTRY),
        help="Resource type",
    )
    parser.add_argument(
        "--config", "-c",
        type=str,
        default="{}",
        help='JSON session config (e.g. \'{"region":"us-south"}\')',
    )
    parser.add_argument(
        "operation",
        choices=["create", "read", "update", "delete"],
        help="Lifecycle step to run",
    )
    parser.add_argument(
        "--id",
        default="",
        help="Resource identifier (<region>/<instance_id>)",
    )
    parser.add_argument(
        "--attrs", "-a",
        type=str,
        default="{}",
        help="JSON resource attributes",
    )
    parser.add_argument(
        "--prior",
        type=str,
        default=None,
        help="JSON attributes recorded by the previous run (update only)",
    )
    return parser


def _load_json(flag: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        print(f"Invalid {flag} JSON: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parses arguments, creates the resource via the factory, runs the
    requested lifecycle step and prints the resulting state as JSON.

    Args:
        argv: Optional argument list (defaults to ``sys.argv``).
    """
    parser = _build_parser()
    ns = parser.parse_args(argv)

    config: dict[str, Any] = _load_json("--config", ns.config)
    attrs: dict[str, Any] = _load_json("--attrs", ns.attrs)
    prior: dict[str, Any] | None = (
        _load_json("--prior", ns.prior) if ns.prior is not None else None
    )

    try:
        resource = resource_factory(ns.resource, config)
    except (ValueError, SmNotifyError) as e:
        # pydantic.ValidationError is a ValueError
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    data = resource.new_data(attrs, prior, ns.id)
    handler = getattr(resource, ns.operation)

    try:
        handler(data)
    except Exception as e:
        print(f"Operation failed: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(data.to_dict(), indent=2, default=str))


if __name__ == "__main__":
    main()
