"""Constants used throughout fuhl."""

import os

# Environment variable overriding the history database location
DATABASE_ENV_VAR = "FUHL_DB"

# Default browser history locations per platform (sys.platform prefix)
DEFAULT_DATABASE_PATHS = {
    "darwin": "~/Library/Application Support/Google/Chrome/Default/History",
    "linux": "~/.config/google-chrome/Default/History",
}

# Config directory and filename
DEFAULT_CONFIG_DIR = os.path.expanduser("~/.config/fuhl")
DEFAULT_CONFIG_FILE = "config.json"

# URLs at or above this length are left out of the candidate list
DEFAULT_MAX_URL_LENGTH = 60

# Maximum number of entries in a ranked view
DEFAULT_RESULT_LIMIT = 50

# Seconds to wait for a key press before redrawing
DEFAULT_POLL_TIMEOUT = 0.2

HISTORY_QUERY = (
    "SELECT id, url, title, visit_count, typed_count, last_visit_time, hidden "
    "FROM urls WHERE length(url) < ? "
    "ORDER BY last_visit_time DESC, visit_count DESC"
)

# Separator between label and locator in a display string
DISPLAY_SEPARATOR = " - "

# Marker shown in front of the selected row
SELECTION_MARKER = "▶"

# Rich styles for the picker screen
PICKER_STYLE = {
    "prompt": "bold yellow",
    "query": "bold",
    "counter": "dim",
    "selected": "reverse bold green",
    "item": "",
    "empty": "dim italic",
}
