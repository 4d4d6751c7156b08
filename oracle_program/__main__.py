# oracle_program/__main__.py
"""
Oracle Program CLI

Usage:
  python3 -m oracle_program execute                  # default variant and market
  python3 -m oracle_program execute --variant price BRENT
  python3 -m oracle_program tally reveals.json       # [{"exit_code", "gas_used", "in_consensus", "result": hex}]
  python3 -m oracle_program serve --port 9200
"""

import argparse
import json
import logging
import sys

from oracle_program.config import ORACLE_HOST, ORACLE_PORT, Settings
from oracle_program.execution import VARIANTS, execution_phase
from oracle_program.models import Reveal
from oracle_program.tally import tally_phase

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
log = logging.getLogger("oracle-program")


def load_reveals(path):
    with open(path) as f:
        raw = json.load(f)
    if not isinstance(raw, list):
        raise ValueError(f"{path}: expected a JSON list of reveals")
    return [Reveal.from_dict(r) for r in raw]


def cmd_execute(args):
    result = execution_phase(args.input.encode("utf-8"), variant=args.variant, settings=Settings.from_env())
    print(json.dumps(result.to_dict(), indent=2))
    return result.exit_code


def cmd_tally(args):
    try:
        reveals = load_reveals(args.reveals)
    except (OSError, ValueError, TypeError) as e:
        log.error(f"Could not read reveals: {e}")
        return 2
    result = tally_phase(b"", reveals)
    print(json.dumps(result.to_dict(), indent=2))
    return result.exit_code


def cmd_serve(args):
    from oracle_program.server import serve

    serve(host=args.host, port=args.port)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(prog="oracle_program", description="Oracle Program execution / tally runner")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("execute", help="Run the execution stage once")
    p.add_argument("input", nargs="?", default="", help="Market identifier, e.g. WBTC/USDC or BRENT")
    p.add_argument("--variant", choices=sorted(VARIANTS), default=None, help="Program variant (default: $ORACLE_VARIANT)")
    p.set_defaults(func=cmd_execute)

    p = sub.add_parser("tally", help="Aggregate reveals read from a JSON file")
    p.add_argument("reveals", help="Path to a JSON list of reveals")
    p.set_defaults(func=cmd_tally)

    p = sub.add_parser("serve", help="Run the local FastAPI host")
    p.add_argument("--host", default=ORACLE_HOST)
    p.add_argument("--port", type=int, default=ORACLE_PORT)
    p.set_defaults(func=cmd_serve)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
