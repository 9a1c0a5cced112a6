import argparse


def parse_args(argv: list[str]):
    p = argparse.ArgumentParser(
        description=(
            "Copy the files named in a list from anywhere under a source folder "
            "into an empty target folder. Runs as a dry run unless told otherwise."
        ),
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument(
        "--file-list",
        "-f",
        required=True,
        help="Text file with one file name per line",
    )
    p.add_argument(
        "--source-dir",
        "-s",
        required=True,
        help="Folder searched recursively for the listed files",
    )
    p.add_argument(
        "--target-dir",
        "-t",
        required=True,
        help="Existing, empty folder the files are copied into",
    )
    p.add_argument(
        "--disable-dry-run",
        "-d",
        action="store_true",
        help="Copy files for real instead of only printing what would be copied",
    )
    p.add_argument(
        "--keep-going",
        action="store_true",
        help="Report a failed copy and continue with the remaining files",
    )
    return p.parse_args(argv)
