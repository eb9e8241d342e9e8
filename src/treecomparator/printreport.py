import sys

from treecomparator import (
    NODE_DIR,
    NODE_KINDS,
    NODE_DIFFERS,
    NODE_A_IS_DIR,
    NODE_A_IS_FILE,
    NODE_UNREADABLE,
    NODE_UNLISTABLE,
    NODE_MISSING_IN_A,
    NODE_MISSING_IN_B,
    ROOT_LABEL,
    INDENT_BLOCK,
    BRANCH_MARKER,
)


def format_branch(depth, message):
    return f"{INDENT_BLOCK * depth}{BRANCH_MARKER}{message}"


def format_node(node):
    """Returns the report text of one DiffNode, without the tree prefix."""
    kind_word = "dir" if node.is_dir else "file"

    if node.kind == NODE_DIR:
        return f'dir "{node.name}"'
    if node.kind == NODE_DIFFERS:
        return f'file "{node.name}" differs'
    if node.kind == NODE_A_IS_DIR:
        return f'dir "{node.name}" in "{node.path_a}" is a file in "{node.path_b}"'
    if node.kind == NODE_A_IS_FILE:
        return f'file "{node.name}" in "{node.path_a}" is a dir in "{node.path_b}"'
    if node.kind == NODE_MISSING_IN_A:
        return f'{kind_word} "{node.name}" is missing in "{node.path_a}"'
    if node.kind == NODE_MISSING_IN_B:
        return f'{kind_word} "{node.name}" is missing in "{node.path_b}"'
    if node.kind == NODE_UNREADABLE:
        return f'file "{node.name}" could not be read'
    if node.kind == NODE_UNLISTABLE:
        return f'dir "{node.name}" could not be compared ({node.error})'
    raise ValueError(f"Unknown node kind: {node.kind!r}")


def iter_report_lines(nodes):
    """Yields the tree lines of `nodes` depth-first, children right after their header."""
    for node in nodes:
        yield format_branch(node.depth, format_node(node))
        if node.children:
            yield from iter_report_lines(node.children)


def write_tree(nodes, stream=None):
    stream = stream if stream is not None else sys.stdout
    for line in iter_report_lines(nodes):
        print(line, file=stream)


def print_report(nodes, stream=None):
    """
    Prints the full comparison report: the root line at depth 0 followed by
    the tree of differences.
    """
    stream = stream if stream is not None else sys.stdout
    print(format_branch(0, ROOT_LABEL), file=stream)
    write_tree(nodes, stream)


def count_outcomes(nodes, counts=None):
    if counts is None:
        counts = {kind: 0 for kind in NODE_KINDS}
    for node in nodes:
        counts[node.kind] += 1
        count_outcomes(node.children, counts)
    return counts


def print_summary(counts, elapsed_time, stream=None):
    """Debug summary: one count per outcome kind and the elapsed time."""
    stream = stream if stream is not None else sys.stderr
    max_label_len = max(len(kind) for kind in counts)

    print("DEBUG: Comparison summary", file=stream)
    for kind, count in counts.items():
        print(f"DEBUG:   {kind:<{max_label_len}} : {count}", file=stream)
    print(f"DEBUG: Elapsed time : {elapsed_time:.3f} seconds", file=stream)
