import os

from treecomparator import (
    CHUNK_SIZE,
    FILES_DIFFER,
    FILES_IDENTICAL,
    FILES_UNREADABLE,
)


def compare_files(path1, path2, chunk_size=CHUNK_SIZE):
    """
    Compares the contents of two regular files byte by byte.

    Sizes are checked first, so files of different length are never read.
    Equal-sized files are read in lock-step in chunks of `chunk_size` bytes
    and the comparison stops at the first mismatching chunk.

    Returns:
        str: FILES_IDENTICAL, FILES_DIFFER, or FILES_UNREADABLE when the size
        of either file cannot be retrieved or either file cannot be read.
    """
    try:
        size1 = os.path.getsize(path1)
        size2 = os.path.getsize(path2)
    except OSError:
        return FILES_UNREADABLE

    if size1 != size2:
        return FILES_DIFFER

    # Empty files of equal size: nothing to read
    if size1 == 0:
        return FILES_IDENTICAL

    try:
        with open(path1, 'rb') as f1, open(path2, 'rb') as f2:
            while True:
                block1 = f1.read(chunk_size)
                block2 = f2.read(chunk_size)
                if len(block1) != len(block2):
                    return FILES_DIFFER
                if block1 != block2:
                    return FILES_DIFFER
                if not block1:
                    return FILES_IDENTICAL
    except OSError:
        return FILES_UNREADABLE


def files_identical(path1, path2):
    """True if both files have bit-identical contents. Read failures count as different."""
    return compare_files(path1, path2) == FILES_IDENTICAL
