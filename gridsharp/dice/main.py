import argparse
import logging

from gridsharp.dice.dice import DieWithHistory, FairRollGenerator


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Roll a die and show its history.")
    parser.add_argument(
        "-f", "--faces", type=int, default=6, help="number of faces (default: 6)"
    )
    parser.add_argument(
        "-H",
        "--history",
        type=int,
        default=4,
        help="number of rolls remembered (default: 4)",
    )
    parser.add_argument(
        "-r", "--rolls", type=int, default=5, help="number of rolls (default: 5)"
    )
    parser.add_argument(
        "-s", "--seed", type=int, default=None, help="seed for reproducible rolls"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    die = DieWithHistory(
        args.faces,
        args.history,
        roll_generator=FairRollGenerator(args.faces, seed=args.seed),
    )
    for i in range(args.rolls):
        print(f"[{i}] :: {die.roll()}")
    print(", ".join(str(value) for value in die))


if __name__ == "__main__":
    main()
