"""CLI: python -m mal [--step 0|1] [--history-file FILE] [--debug]"""

import argparse
import logging
import sys

from .config import STEPS, ReplConfig
from .repl import main_loop


def main(argv=None):
    cfg = ReplConfig.from_env()

    parser = argparse.ArgumentParser(prog="mal", description="mal read-print REPL")
    parser.add_argument("--step", type=int, choices=STEPS, default=cfg.step)
    parser.add_argument("--history-file", default=cfg.history_file)
    parser.add_argument("--no-history", action="store_true", help="do not load or save history")
    parser.add_argument("--prompt", default=cfg.prompt)
    parser.add_argument("--debug", action="store_true", default=cfg.debug)
    args = parser.parse_args(argv)

    cfg.step = args.step
    cfg.history_file = None if args.no_history else args.history_file
    cfg.prompt = args.prompt
    cfg.debug = args.debug

    logging.basicConfig(stream=sys.stderr, format="%(name)s: %(message)s")
    logging.getLogger("mal").setLevel(logging.DEBUG if cfg.debug else logging.WARNING)

    main_loop(cfg)


if __name__ == "__main__":
    main()
