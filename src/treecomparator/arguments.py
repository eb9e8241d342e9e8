import sys
import textwrap
import argparse

from treecomparator import EXIT_USAGE, __version__


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser whose usage errors exit with status 1."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def get_arguments(argv=None):
    """
    Sets up and parses command-line arguments for the tree comparison tool.

    Returns:
        argparse.Namespace: An object containing the parsed arguments.
    """
    WRAP_WIDTH = 78

    main_description_raw = (
        "Compares two directory trees and prints every difference between them "
        "as an indented tree: entries missing on one side, names that are a file "
        "on one side and a directory on the other, and files whose contents differ."
    )

    comparison_logic_raw = """
        Comparison Logic:
        1. Symbolic links are skipped on both sides and never followed.
        2. At each level, names are reported in this order:
        - names that are files (or absent) on both sides,
        - names that are a file on one side and a directory on the other,
        - names that are directories on both sides (recursed into).
        Within each group, names are sorted alphabetically.
        3. Two files are identical when they have the same size and the same
        bytes. Files that cannot be read are reported as differing unless
        --report-unreadable is given.
    """

    wrapped_comparison_logic_lines = []
    for line in textwrap.dedent(comparison_logic_raw).splitlines():
        if not line.strip():
            wrapped_comparison_logic_lines.append("")
            continue

        leading_spaces = len(line) - len(line.lstrip())
        indent = " " * leading_spaces
        wrapped_comparison_logic_lines.append(textwrap.fill(line.lstrip(),
                                                            width=WRAP_WIDTH - leading_spaces,
                                                            initial_indent=indent,
                                                            subsequent_indent=indent))

    full_description = (textwrap.fill(main_description_raw, width=WRAP_WIDTH)
                        + "\n" + "\n".join(wrapped_comparison_logic_lines))

    parser = ArgumentParser(
        prog="treecomparator",
        usage="%(prog)s [-h] [--report-unreadable] [--keep-going] [--debug] [--version]\n"
              "                      [--] dir_a dir_b",
        description=full_description,
        epilog="Put '--' before the directories when a path starts with '-', e.g.\n"
               "  treecomparator -- -data backup/",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument("dir_a", help="The path to the first directory (A).")
    parser.add_argument("dir_b", help="The path to the second directory (B).")
    parser.add_argument("--report-unreadable", action="store_true",
                        help="Report files that cannot be read as 'could not be read' "
                             "instead of 'differs'.")
    parser.add_argument("--keep-going", action="store_true",
                        help="When a subdirectory cannot be listed, report it as "
                             "'could not be compared' and continue with its siblings "
                             "instead of aborting the whole comparison.")
    parser.add_argument("--debug", action="store_true",
                        help="Print the directories being listed and a summary of the "
                             "outcomes to the error stream.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser.parse_args(argv)
