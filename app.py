import sys

from findcopy.cli import parse_args
from findcopy.copyops import run_find_copy


def main(argv: list[str] | None = None):
    args = parse_args(sys.argv[1:] if argv is None else argv)

    run_find_copy(
        file_list=args.file_list,
        source_dir=args.source_dir,
        target_dir=args.target_dir,
        apply=bool(args.disable_dry_run),
        keep_going=bool(args.keep_going),
    )


if __name__ == "__main__":
    main()
