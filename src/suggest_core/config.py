import os

# Fragments file used when no path is given on the command line
DEFAULT_FRAGMENTS_FILE: str = "fragments.txt"
ENCODING: str = "utf-8"

# Rendered count suffix: " (NN)"
COUNT_CAP: int = 99
SUFFIX_WIDTH: int = len(f" ({COUNT_CAP:02d})")

# /* ~~~ overlap search: "prefix-function" (linear) or "naive" (longest-first scan) ~~~ */
OVERLAP_ALGORITHM: str = "prefix-function"

# /* ~~~ what to do when a fragment's overlap reaches left of column 0 ~~~ */
# "clip": draw from column 0, dropping the characters that would be off-screen
# "suppress": skip the fragment, the next one takes its row
OVERFLOW_POLICY: str = "clip"

# Logs go to a file so they never land on the drawn screen
LOG_FILE: str = "tailsuggest.log"
VERBOSE: bool = os.environ.get("TAILSUGGEST_VERBOSE") == "1"
