"""ghost-audit CLI: inspect the configuration snapshot and compute fingerprints."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

from ghost_audit.api import stamp_decision
from ghost_audit.audit_keys import AuditSecretsSettings, SecretResolver
from ghost_audit.canonical import canonicalize_snapshot, sha256_hex
from ghost_audit.errors import FingerprintError
from ghost_audit.snapshot import CURRENT_SNAPSHOT, FINGERPRINT_KEY_VERSION, TEMPLATE_VERSION


def _build_parser() -> argparse.ArgumentParser:
    try:
        package_version = get_version("ghost-audit")
    except PackageNotFoundError:
        package_version = "dev"

    parser = argparse.ArgumentParser(
        prog="ghost-audit",
        description="ghost-audit: tamper-evident decision fingerprints"
    )
    parser.add_argument("--version", action="version", version=f"ghost-audit {package_version}")

    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )
    parent_parser.add_argument(
        "--json",
        dest="as_json",
        action="store_true",
        help="Print machine-readable JSON."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "snapshot",
        help="Print the canonical configuration snapshot and its hash",
        parents=[parent_parser]
    )

    fingerprint_parser = subparsers.add_parser(
        "fingerprint",
        help="Compute the decision fingerprint for a prompt",
        parents=[parent_parser]
    )
    prompt_group = fingerprint_parser.add_mutually_exclusive_group(required=True)
    prompt_group.add_argument(
        "--prompt",
        default=None,
        help="Prompt text"
    )
    prompt_group.add_argument(
        "--prompt-file",
        type=Path,
        default=None,
        help="Path to a UTF-8 file holding the prompt"
    )
    fingerprint_parser.add_argument(
        "--key-version",
        default=FINGERPRINT_KEY_VERSION,
        help=f"Audit secret key version (default: {FINGERPRINT_KEY_VERSION})"
    )
    fingerprint_parser.add_argument(
        "--template-version",
        default=TEMPLATE_VERSION,
        help=f"Prompt template version (default: {TEMPLATE_VERSION})"
    )
    return parser


def _cmd_snapshot(args: argparse.Namespace) -> None:
    canonical = canonicalize_snapshot(CURRENT_SNAPSHOT)
    snapshot_hash = sha256_hex(canonical)
    if args.as_json:
        print(json.dumps({"canonical": canonical, "snapshot_hash": snapshot_hash}, indent=2))
    else:
        print(f"Canonical: {canonical}")
        print(f"Snapshot hash: {snapshot_hash}")


def _cmd_fingerprint(args: argparse.Namespace) -> None:
    if args.prompt_file is not None:
        prompt = args.prompt_file.read_text(encoding="utf-8")
    else:
        prompt = args.prompt

    resolver = SecretResolver.from_settings(AuditSecretsSettings())
    stamp = stamp_decision(
        prompt,
        resolver,
        key_version=args.key_version,
        template_version=args.template_version,
    )
    if args.as_json:
        print(json.dumps(stamp.model_dump(), indent=2, sort_keys=True))
    else:
        print(stamp.decision_fingerprint)


def main():
    """Main CLI entry point for ghost-audit commands."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "snapshot":
            _cmd_snapshot(args)
        elif args.command == "fingerprint":
            _cmd_fingerprint(args)
    except (FingerprintError, OSError, UnicodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
