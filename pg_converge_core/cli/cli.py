import argparse
import logging
import sys

from pg_converge_core.lib.compare import load_source, process
from pg_converge_core.lib.errors import DiffError, PatchValidationError
from pg_converge_core.lib.validate import validate_patch


def write_to_file(patch, filename):
    """Write the patch to a file."""
    with open(filename, 'w', encoding='utf-8') as f:
        f.write(patch)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="pg-converge: generate the DDL patch that turns one PostgreSQL schema dump into another"
    )
    parser.add_argument("source", help="Current schema (.sql file, directory of .sql files, '-' for stdin, or raw SQL)")
    parser.add_argument("desired", help="Desired schema, in the same forms as source")
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for INFO, -vv for DEBUG)"
    )
    parser.add_argument(
        "-o", "--output",
        help="Write the patch to this file instead of stdout"
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Validate the generated patch with the PostgreSQL parser"
    )

    args = parser.parse_args(argv)

    # Set log level based on verbosity count
    if args.verbose == 0:
        log_level = logging.WARNING
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    # Configure logging
    logging.basicConfig(
        level=log_level,
        format='%(levelname)s: %(message)s'
    )

    try:
        patch = process(load_source(args.source), load_source(args.desired))
    except DiffError as e:
        print(e.detail(), file=sys.stderr)
        return 1

    if args.check:
        try:
            count = validate_patch(patch)
        except PatchValidationError as e:
            print(f"generated patch is invalid: {e.message}", file=sys.stderr)
            return 2
        logging.info(f"Patch check passed: {count} statements")

    if args.output:
        write_to_file(patch, args.output)
        print(f"Patch written to: {args.output}")
    else:
        sys.stdout.write(patch)
    return 0


if __name__ == "__main__":
    sys.exit(main())
