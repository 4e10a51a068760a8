from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from hashgen.hashing import HashComputationError, hash_password, verify_password
from hashgen.report import build_users_yaml, render_report
from hashgen.settings import DEFAULT_PASSWORD, DEFAULT_USERNAME, ERROR_PREFIX

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="make-password-hash",
        description="Genera password_hash bcrypt y el UPDATE SQL para la tabla users",
    )
    ap.add_argument(
        "password",
        nargs="?",
        default=None,
        help=f"Password en texto plano (default: {DEFAULT_PASSWORD}); si empieza con '-' se toma igual",
    )
    ap.add_argument("--check", metavar="HASH", help="Verifica el password contra un hash existente")
    ap.add_argument("--yaml", action="store_true", help="Imprime también el snippet para users.yaml")
    ap.add_argument("-v", "--verbose", action="store_true", help="Logs de debug en stderr")
    return ap


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, extras = build_parser().parse_known_args(argv)
    _setup_logging(args.verbose)

    # Igual que argv[2] || "admin123": un token tipo "-Secret1" queda en extras,
    # y el string vacío cae al default
    password = args.password
    if password is None and extras:
        password = extras[0]
    password = password or DEFAULT_PASSWORD

    if args.check is not None:
        ok = verify_password(password, args.check)
        logger.debug("verificación: %s", ok)
        print("OK" if ok else "MISMATCH")
        return 0 if ok else 1

    try:
        password_hash = hash_password(password)
    except HashComputationError as e:
        print(f"{ERROR_PREFIX} {e}", file=sys.stderr)
        return 1

    print(render_report(password, password_hash))

    if args.yaml:
        print(build_users_yaml(DEFAULT_USERNAME, password_hash), end="")

    return 0


if __name__ == "__main__":
    sys.exit(main())
