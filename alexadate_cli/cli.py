import argparse
import sys

from alexadate import AlexaDateConverter, AlexaDateError


def entrance(argv=None):
    alexadate_argparse = argparse.ArgumentParser(
        description="Convert AMAZON.DATE slot values to calendar dates."
    )
    alexadate_argparse.add_argument(
        "date_strings",
        nargs="+",
        help='AMAZON.DATE values, e.g. "2015-W48", "2017-WI" or "201X"',
    )
    alexadate_argparse.add_argument(
        "--hemisphere",
        choices=["northern", "southern"],
        default="northern",
        help="Which meteorological seasons to anchor season values to",
    )
    alexadate_argparse.add_argument(
        "--classify",
        help="Print the category of each value instead of converting it",
        action="store_true",
    )

    args = alexadate_argparse.parse_args(argv)
    converter = AlexaDateConverter(settings={"HEMISPHERE": args.hemisphere})

    failed = False
    for date_string in args.date_strings:
        if args.classify:
            category = converter.classify(date_string)
            print(f"{date_string}\t{category.value if category else 'unknown'}")
            continue
        try:
            print(f"{date_string}\t{converter.convert_to_day(date_string).isoformat()}")
        except AlexaDateError as e:
            print(f"alexadate: {e}", file=sys.stderr)
            failed = True
        except ValueError as e:
            print(f"alexadate: {date_string}: {e}", file=sys.stderr)
            failed = True

    if failed:
        sys.exit(1)
