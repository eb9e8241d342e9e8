import os
import sys

from treecomparator.filecheck import compare_files

from treecomparator import (
    NODE_DIR,
    NODE_DIFFERS,
    NODE_A_IS_DIR,
    NODE_A_IS_FILE,
    NODE_MISSING_IN_A,
    NODE_MISSING_IN_B,
    NODE_UNREADABLE,
    NODE_UNLISTABLE,
    FILES_DIFFER,
    FILES_UNREADABLE,
    CATEGORY_MIXED,
    CATEGORY_BOTH_DIRS,
    CATEGORY_BOTH_FILES,
)


class TreeScanError(Exception):
    """Raised when the entries of a directory cannot be listed."""

    def __init__(self, path, cause):
        self.path = path
        self.cause = cause
        reason = getattr(cause, 'strerror', None) or str(cause)
        super().__init__(f"cannot list directory '{path}': {reason}")


class DiffNode:
    def __init__(self, kind, name, path_a, path_b, depth, is_dir=False, children=None, error=None):
        self.kind = kind
        self.name = name
        self.path_a = path_a # Parent directory on side A, as it appears in the report
        self.path_b = path_b
        self.depth = depth
        self.is_dir = is_dir # For missing entries: type on the side where the entry exists
        self.children = children if children is not None else []
        self.error = error

    def __repr__(self):
        return f"DiffNode({self.kind!r}, {self.name!r}, depth={self.depth})"


def list_entries(path):
    """
    Returns the set of names of the direct children of `path`, symbolic links
    excluded. The target of a symlink is never inspected.
    """
    names = set()
    try:
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_symlink():
                    continue
                names.add(entry.name)
    except OSError as e:
        raise TreeScanError(path, e) from e
    return names


def entry_category(path_a, path_b, name):
    """0 if neither side is a directory, 1 if exactly one is, 2 if both are."""
    a_is_dir = os.path.isdir(os.path.join(path_a, name))
    b_is_dir = os.path.isdir(os.path.join(path_b, name))

    if not a_is_dir and not b_is_dir:
        return CATEGORY_BOTH_FILES
    if a_is_dir != b_is_dir:
        return CATEGORY_MIXED
    return CATEGORY_BOTH_DIRS


def ordered_names(path_a, path_b, names):
    # Plain files first, then type conflicts, then subdirectories; alphabetical within each
    return sorted(names, key=lambda name: (entry_category(path_a, path_b, name), name))


def compare_tree(path_a, path_b, depth=0, report_unreadable=False, keep_going=False, debug=False):
    """
    Compares two directories recursively and returns the differences as a list
    of DiffNode, in report order.

    Every name present (as a non-symlink) in either directory is visited exactly
    once. Matching subdirectories yield a NODE_DIR node whose children hold the
    comparison of the subdirectory pair at `depth + 1`.

    With `report_unreadable`, files that cannot be read produce NODE_UNREADABLE
    instead of NODE_DIFFERS. With `keep_going`, a subdirectory pair that cannot
    be listed produces a NODE_UNLISTABLE node and the walk goes on; otherwise
    TreeScanError propagates and aborts the whole comparison.
    """
    if debug:
        print(f"DEBUG: Listing '{path_a}' and '{path_b}' (depth {depth})", file=sys.stderr)

    entries_a = list_entries(path_a)
    entries_b = list_entries(path_b)

    nodes = []
    for name in ordered_names(path_a, path_b, entries_a | entries_b):
        sub_path_a = os.path.join(path_a, name)
        sub_path_b = os.path.join(path_b, name)
        in_a = name in entries_a
        in_b = name in entries_b

        if in_a and in_b:
            is_dir_a = os.path.isdir(sub_path_a)
            is_dir_b = os.path.isdir(sub_path_b)

            if is_dir_a and not is_dir_b:
                nodes.append(DiffNode(NODE_A_IS_DIR, name, path_a, path_b, depth, is_dir=True))
            elif not is_dir_a and is_dir_b:
                nodes.append(DiffNode(NODE_A_IS_FILE, name, path_a, path_b, depth))
            elif is_dir_a and is_dir_b:
                try:
                    children = compare_tree(sub_path_a, sub_path_b, depth + 1,
                                            report_unreadable, keep_going, debug)
                except TreeScanError as e:
                    if not keep_going:
                        raise
                    if debug:
                        print(f"DEBUG: Skipping '{name}': {e}", file=sys.stderr)
                    nodes.append(DiffNode(NODE_UNLISTABLE, name, path_a, path_b, depth,
                                          is_dir=True, error=str(e)))
                    continue
                nodes.append(DiffNode(NODE_DIR, name, path_a, path_b, depth,
                                      is_dir=True, children=children))
            else:
                outcome = compare_files(sub_path_a, sub_path_b)
                if outcome == FILES_UNREADABLE and report_unreadable:
                    nodes.append(DiffNode(NODE_UNREADABLE, name, path_a, path_b, depth))
                elif outcome in (FILES_DIFFER, FILES_UNREADABLE):
                    nodes.append(DiffNode(NODE_DIFFERS, name, path_a, path_b, depth))
        elif not in_a:
            nodes.append(DiffNode(NODE_MISSING_IN_A, name, path_a, path_b, depth,
                                  is_dir=os.path.isdir(sub_path_b)))
        else:
            nodes.append(DiffNode(NODE_MISSING_IN_B, name, path_a, path_b, depth,
                                  is_dir=os.path.isdir(sub_path_a)))

    return nodes
