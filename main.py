#!/usr/bin/env python3
"""
main.py  —  envstore CLI
Usage:
  envstore get KEY                  # print one resolved variable
  envstore get KEY --json           # {"key": ..., "value": ...}
  envstore list [--json|--yaml]     # every variable from the file
  envstore check --require DB_HOST  # load + verify required variables
  envstore run -- python app.py     # run a program with the variables applied
  envstore version                  # version + dependency info

Common options:
  --path DIR        directory holding the file (default: .)
  --file NAME       file name (default: .env)
  --require KEY     required variable, repeatable
  --overwrite       let the file replace variables that are already set
  --no-global       keep variables private, do not touch os.environ
  --config FILE     settings file (default: envstore.yaml or ENVSTORE_CONFIG)
  --log-level LVL   DEBUG/INFO/WARNING/ERROR
"""

import argparse
import sys


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--path", default=None,
                        help="Directory holding the .env file (default: .)")
    common.add_argument("--file", default=None,
                        help="File name (default: .env)")
    common.add_argument("--require", action="append", default=[], metavar="KEY",
                        help="Variable that must be set (repeatable)")
    common.add_argument("--overwrite", action="store_true",
                        help="Replace variables that are already set")
    common.add_argument("--no-global", action="store_true",
                        help="Do not write variables to the process environment")
    common.add_argument("--config", default=None,
                        help="Settings file (default: envstore.yaml)")
    common.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        type=str.upper, help="Log level")
    return common


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="envstore",
                                     description="Load .env files into the environment")
    sub = parser.add_subparsers(dest="cmd")
    common = _common_options()

    p_get = sub.add_parser("get", parents=[common], help="Print one variable")
    p_get.add_argument("key", help="Variable name (case-insensitive)")
    p_get.add_argument("--json", action="store_true", help="JSON output")

    p_list = sub.add_parser("list", parents=[common], help="Print every variable")
    fmt = p_list.add_mutually_exclusive_group()
    fmt.add_argument("--json", dest="format", action="store_const", const="json",
                     help="JSON output")
    fmt.add_argument("--yaml", dest="format", action="store_const", const="yaml",
                     help="YAML output")
    p_list.set_defaults(format="table")

    p_check = sub.add_parser("check", parents=[common],
                             help="Load the file and verify required variables")
    p_check.add_argument("--json", action="store_true", help="JSON output")

    p_run = sub.add_parser("run", parents=[common],
                           help="Run a command with the variables applied")
    p_run.add_argument("command", nargs=argparse.REMAINDER,
                       help="Command to run (after --)")

    p_version = sub.add_parser("version", help="Show version info")
    p_version.add_argument("--json", action="store_true", help="JSON output")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.cmd is None:
        parser.print_help()
        return 2

    from cli import dispatch_command
    return dispatch_command(args)


if __name__ == "__main__":
    sys.exit(main())
