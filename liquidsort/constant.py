
NUM_SPACES_PER_VIAL = 4     # Default capacity when the puzzle doesn't declare one
NUM_SCRATCH_CONTAINERS = 2  # Empty containers appended to every puzzle
MAX_MUST_EMPTY = 2          # Tied to the number of scratch containers


DEFAULT_SOLVE_MODE = "optimal"

REPORT_ITERATION_FREQ = 10000
MAX_ITERATIONS = 2_000_000  # 0 searches without a ceiling

USE_READCHAR = True

# Puzzle text markers
EMPTY_MARKER = "-"
MUST_FILL_MARKER = "*"
MUST_EMPTY_MARKER = "!"
EMPTY_LINE_MARKER = "."
COMMENT_MARKER = "#"
CAPACITY_KEYWORD = "capacity"
