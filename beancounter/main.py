import argparse
import logging

import numpy as np

from .models.bean import create_bean
from .models.board import BeanCounter
from .utils.simulate import run_machine

LOG_FORMAT = "%(levelname)s: %(message)s"


class UsageError(Exception):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    # bad command lines print our usage text instead of argparse's
    def error(self, message):
        raise UsageError(message)


def show_usage():
    print(
        "Usage: beancounter slot_count bean_count <luck | skill> [debug]"
        " [--seed N] [--progress] [--plot FILE]"
    )
    print("Example: beancounter 10 400 luck")
    print("Example: beancounter 20 1000 skill debug")


def get_parser():
    parser = _ArgumentParser(
        prog="beancounter", description="Bean counter (Galton box) simulation."
    )
    parser.add_argument("slot_count", type=int, help="Number of slots.")
    parser.add_argument("bean_count", type=int, help="Number of beans to drop.")
    parser.add_argument("mode", choices=["luck", "skill"], help="Luck or skill mode.")
    parser.add_argument(
        "debug", nargs="?", choices=["debug"], help="Print the machine every step."
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed.")
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar."
    )
    parser.add_argument(
        "--plot", default=None, metavar="FILE", help="Save a histogram of the slots."
    )
    return parser


def parse_args(argv=None):
    args = get_parser().parse_intermixed_args(argv)
    if args.slot_count < 1:
        raise UsageError("slot_count must be at least 1")
    if args.bean_count < 0:
        raise UsageError("bean_count cannot be negative")
    return args


def main(argv=None):
    """
    Runs the machine in text mode and prints the slot bean counts at the end.
    Returns the exit code.
    """
    try:
        args = parse_args(argv)
    except UsageError:
        show_usage()
        return 1

    debug = args.debug is not None
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING, format=LOG_FORMAT
    )

    rng = np.random.default_rng(args.seed)
    logic = BeanCounter(args.slot_count)
    beans = [
        create_bean(args.slot_count, args.mode == "luck", rng)
        for _ in range(args.bean_count)
    ]
    logic.reset(beans)

    if debug:
        print(logic)

    run_machine(logic, debug=debug, progress=args.progress)

    print("Slot bean counts:")
    print(logic.get_slot_string())

    if args.plot is not None:
        from .utils.plotting import plot_slots

        plot_slots(logic, filename=args.plot)
        logging.info("Histogram saved to %s", args.plot)
    return 0
