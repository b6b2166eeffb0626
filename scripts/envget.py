from __future__ import annotations

import argparse
import logging
import shlex
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from envfile import DotenvError, GetConfig, get


def _format(name: str, value: str, *, export: bool) -> str:
    if export:
        return f"export {name}={shlex.quote(value)}"
    return f"{name}={value}"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Print variables resolved from dotenv files and the environment.")
    ap.add_argument("names", nargs="*", help="Variables to look up (default: all)")
    ap.add_argument(
        "-f",
        "--from",
        dest="sources",
        action="append",
        default=[],
        help="Dotenv file to read; repeat for several (default: .env)",
    )
    ap.add_argument("--prioritize-system", action="store_true", help="Prefer process environment values over file values.")
    ap.add_argument("--lenient", action="store_true", help="Use variables parsed before a read/format error instead of failing.")
    ap.add_argument("--export", action="store_true", help="Print shell `export` statements with quoted values.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr.")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    cfg = GetConfig(
        variables=tuple(args.names),
        sources=tuple(args.sources),
        prioritize_system=args.prioritize_system,
        strict=not args.lenient,
    )

    try:
        result = get(cfg)
    except DotenvError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    names = list(result.values) if args.names else sorted(result.values)
    for name in names:
        print(_format(name, result.values[name], export=args.export))

    if result.not_found:
        print(f"not found: {', '.join(result.not_found)}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
