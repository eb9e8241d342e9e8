'''
# --- Script Description ---
#
# Compares two directory trees (A and B) and prints every difference between
# them as an indented tree on the standard output:
#
#  1. Files whose contents differ (size first, then bytes).
#  2. Names that are a directory on one side and a file on the other.
#  3. Files and directories missing on one side.
#
# Matching subdirectories are listed as "dir" headers and compared
# recursively, one indent level deeper. Symbolic links are ignored.
#
# Usage examples:
# ---------------
# treecomparator backup/ original/
# treecomparator --keep-going --report-unreadable /mnt/a /mnt/b
#
# Exit status:
# ------------
# 0  the comparison ran to completion (differences or not)
# 1  wrong arguments, or a path that is not a directory
# 2  a directory could not be listed during the comparison
#
# --- End of Script Description ---
'''

import os
import sys
import time

from treecomparator.arguments import get_arguments
from treecomparator.scan import TreeScanError, compare_tree
from treecomparator.printreport import (
    count_outcomes,
    print_report,
    print_summary,
)

from treecomparator import (
    EXIT_OK,
    EXIT_USAGE,
    EXIT_SCAN_ERROR,
)

MIN_PYTHON_VERSION = (3, 8)


def main(argv=None):
    start_time_cpu = time.perf_counter()

    args = get_arguments(argv)

    if not os.path.isdir(args.dir_a):
        print(f"Error: Path A '{args.dir_a}' not found or is not a directory.", file=sys.stderr)
        return EXIT_USAGE

    if not os.path.isdir(args.dir_b):
        print(f"Error: Path B '{args.dir_b}' not found or is not a directory.", file=sys.stderr)
        return EXIT_USAGE

    # The whole tree is compared before anything is printed, so a fatal
    # listing error leaves no partial report on stdout
    try:
        nodes = compare_tree(args.dir_a, args.dir_b, 1,
                             report_unreadable=args.report_unreadable,
                             keep_going=args.keep_going,
                             debug=args.debug)
    except TreeScanError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SCAN_ERROR

    print_report(nodes)

    if args.debug:
        print_summary(count_outcomes(nodes), time.perf_counter() - start_time_cpu)

    return EXIT_OK


def run():
    if sys.version_info < MIN_PYTHON_VERSION:
        print(
            f"Error: This program requires Python {MIN_PYTHON_VERSION[0]}.{MIN_PYTHON_VERSION[1]} or higher. "
            f"You are currently using Python {sys.version_info.major}.{sys.version_info.minor}.",
            file=sys.stderr,
        )
        sys.exit(EXIT_USAGE)

    # Names that are not valid in the filesystem encoding come back from
    # os.scandir as lone surrogates; write them out as the original bytes
    for stream in (sys.stdout, sys.stderr):
        if hasattr(stream, "reconfigure"):
            stream.reconfigure(errors="surrogateescape")

    sys.exit(main())


if __name__ == "__main__":
    run()
