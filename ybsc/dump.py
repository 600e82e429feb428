#!/usr/bin/env python3
"""
Print every star of a YBSC binary catalogue, one line per star.

Example:
    python -m ybsc.dump ./BSC5 --json bsc5.json
"""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Sequence

from .catalog import Star, load
from .errors import YbscError


def format_sci(value: float, width: int = 9, precision: int = 3) -> str:
    """Signed scientific notation with a bare exponent, e.g. ``+1.000e-3``."""
    mantissa, exponent = f"{value:+.{precision}e}".split("e")
    return f"{mantissa}e{int(exponent)}".rjust(width)


def format_star(star: Star) -> str:
    is0, is1 = star.spectral
    return (
        f"{star.xno:8} {star.sra0:9.3f} {star.sdec0:+9.3f} {is0}{is1} "
        f"{star.mag:+4.2f} {format_sci(star.xrpm)} {format_sci(star.xdpm)}"
    )


def dump(catalog_path: Path, json_path: Path | None) -> int:
    try:
        ybsc = load(catalog_path)
    except YbscError as exc:
        logging.error("%s: %s", catalog_path, exc)
        return exc.exit_code
    except OSError as exc:
        logging.error("cannot read %s: %s", catalog_path, exc)
        return 1
    logging.info(
        "Loaded %d star(s) from %s (%s, ids %s, proper motion %s)",
        len(ybsc),
        catalog_path,
        ybsc.equinox.value,
        ybsc.id_type.name,
        "yes" if ybsc.have_proper_motion else "no",
    )
    for star in ybsc.stars:
        print(format_star(star))
    if json_path:
        json_path.write_text(json.dumps(ybsc.to_dict(), indent=2), encoding="utf-8")
        logging.info("JSON report saved to %s", json_path)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("catalog", type=Path, help="YBSC binary catalogue file (e.g. BSC5)")
    parser.add_argument("--json", type=Path, help="optional path to write the decoded catalogue as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: WARNING",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    log_level = getattr(logging, args.log_level.upper(), None)
    if not isinstance(log_level, int):
        parser.error(f"invalid log level {args.log_level!r}")
    logging.basicConfig(level=log_level, format="%(levelname)s %(message)s")
    return dump(args.catalog, args.json)


if __name__ == "__main__":
    raise SystemExit(main())
