"""Runs the built-in reflang demonstration programs. Uses the error handling context manager, so any runtime error ends
the process with one ABORT line and exit status 1. Called from the reflang executable script.
"""

import argparse
import logging
import sys

from reflang.lang.demos import DEMOS
from reflang.lang.error import ErrorHandler, GenericException
from reflang.lang.session import Session


def create_arg_parser():
    parser = argparse.ArgumentParser(prog="reflang", description="Tree-walking interpreter for a small imperative "
                                                                 "language with by-reference parameters.")
    parser.add_argument("demo", nargs="?", help="name of the demonstration program to run (if empty, lists them)")
    parser.add_argument("--list", action="store_true", help="list demonstration programs and exit")
    parser.add_argument("--render-only", action="store_true", help="print the program without running it")
    parser.add_argument("--no-render", action="store_true", help="run the program without printing it first")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every executed statement")
    return parser


def list_demos():
    width = max(len(name) for name in DEMOS)
    for name, builder in DEMOS.items():
        print(f"  {name:<{width}}  {builder.__doc__.splitlines()[0]}")


def main(argv=None):
    """Runs reflang. Called from the reflang executable script."""
    args = create_arg_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    if args.list or args.demo is None:
        list_demos()
        return

    with ErrorHandler() as error_handler:
        if args.demo not in DEMOS:
            raise GenericException("no demonstration program named '{}'", args.demo)

        sess = Session(error_handler, DEMOS[args.demo](), args.demo)
        if args.render_only:
            print(sess.render(), end="")
        elif args.no_render:
            sess.run()
        else:
            sess.demonstrate()


if __name__ == "__main__":
    main()
