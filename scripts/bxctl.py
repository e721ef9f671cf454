"""Command-line helper for reconciling Beeswax users and roles.

This module serves as a CLI wrapper around beeswax_provider resources and
data sources.
"""
from __future__ import annotations
import argparse
import json
import logging
import os
import sys
from pathlib import Path

import yaml

SCRIPT_DIR = Path(__file__).parent
PROJECT_ROOT = SCRIPT_DIR.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from beeswax_provider.core.beeswax.exceptions import BeeswaxError
from beeswax_provider.core.state import RoleState, UserState
from beeswax_provider.provider import BeeswaxProvider


def load_manifest(path: str) -> dict:
    """Read a YAML or JSON desired-state manifest."""
    with open(path, encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Manifest {path} must contain a mapping")
    return data


def _emit(payload) -> None:
    print(json.dumps(payload, indent=2, sort_keys=True))


def _apply(resource, state_cls, manifest_path: str, existing_id):
    plan = state_cls.from_mapping(load_manifest(manifest_path))
    if existing_id is None:
        return resource.create(plan)
    return resource.update(plan, state_cls(id=existing_id))


def main() -> None:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Beeswax user/role reconciliation helper")
    parser.add_argument("--host", default=os.environ.get("BEESWAX_HOST"))
    parser.add_argument("--email", default=os.environ.get("BEESWAX_EMAIL"))
    parser.add_argument("--password", default=os.environ.get("BEESWAX_PASSWORD"))
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd")

    for name in ("get-user", "get-role", "delete-user", "delete-role"):
        sp = sub.add_parser(name)
        sp.add_argument("id", type=int)

    sub.add_parser("list-roles")

    for name in ("apply-user", "apply-role"):
        sp = sub.add_parser(name)
        sp.add_argument("manifest", help="YAML or JSON desired-state file")
        sp.add_argument("--id", type=int, default=None, help="Existing ID; updates instead of creating")

    args = parser.parse_args()

    if not args.cmd:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    provider = BeeswaxProvider()
    try:
        provider.configure(host=args.host, email=args.email, password=args.password)
        resources = provider.resources()
        data_sources = provider.data_sources()

        if args.cmd == "get-user":
            _emit(data_sources["beeswax_user"].read(args.id).to_dict())
        elif args.cmd == "get-role":
            _emit(data_sources["beeswax_role"].read(args.id).to_dict())
        elif args.cmd == "list-roles":
            _emit(data_sources["beeswax_roles"].read().to_dict())
        elif args.cmd == "apply-user":
            _emit(_apply(resources["beeswax_user"], UserState, args.manifest, args.id).to_dict())
        elif args.cmd == "apply-role":
            _emit(_apply(resources["beeswax_role"], RoleState, args.manifest, args.id).to_dict())
        elif args.cmd == "delete-user":
            resources["beeswax_user"].delete(UserState(id=args.id))
        elif args.cmd == "delete-role":
            resources["beeswax_role"].delete(RoleState(id=args.id))
    except (BeeswaxError, ValueError, OSError, yaml.YAMLError) as e:
        print(f"[{args.cmd}] Error: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        if provider.client is not None:
            provider.client.close()


if __name__ == "__main__":
    main()
