__version__ = "1.0.0"

# --- Tree layout ---
INDENT_BLOCK = "|  "
BRANCH_MARKER = "|- "
ROOT_LABEL = "<root>"

# --- Byte-equality checker ---
CHUNK_SIZE = 8192

FILES_IDENTICAL = "identical"
FILES_DIFFER = "differ"
FILES_UNREADABLE = "unreadable"

# --- Entry categories, used only to order the names of one level ---
CATEGORY_BOTH_FILES = 0
CATEGORY_MIXED = 1
CATEGORY_BOTH_DIRS = 2

# --- Outcome kinds of a DiffNode ---
NODE_DIR = "dir"                    # both sides are directories, children follow
NODE_DIFFERS = "differs"            # both sides are files with different content
NODE_A_IS_DIR = "a_is_dir"          # dir in A, file in B
NODE_A_IS_FILE = "a_is_file"        # file in A, dir in B
NODE_MISSING_IN_A = "missing_in_a"
NODE_MISSING_IN_B = "missing_in_b"
NODE_UNREADABLE = "unreadable"      # only with --report-unreadable
NODE_UNLISTABLE = "unlistable"      # only with --keep-going

# Order of the debug summary
NODE_KINDS = (
    NODE_DIR,
    NODE_DIFFERS,
    NODE_A_IS_DIR,
    NODE_A_IS_FILE,
    NODE_MISSING_IN_A,
    NODE_MISSING_IN_B,
    NODE_UNREADABLE,
    NODE_UNLISTABLE,
)

# --- Exit statuses ---
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_SCAN_ERROR = 2
