# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
See src/focus_matrix/config.py for how each value is parsed.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "FOCUS_APP_NAME": "App display name (default: focus-matrix).",
    "FOCUS_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    # Paths (gitignored)
    "FOCUS_DATA_DIR": "Local data directory (default: .local/focus_matrix).",
    "FOCUS_LOG_DIR": "Directory for focus_matrix.log (default: <data_dir>).",
    # Storage
    "FOCUS_STORAGE_BACKEND": "Key-value backend: sqlite or json (default: sqlite).",
    "FOCUS_STORE_PATH": (
        "Store file (default: <data_dir>/store.sqlite3, or <data_dir>/store.json for json)."
    ),
    # Session defaults
    "FOCUS_DEFAULT_QUADRANT": "Quadrant new tasks go to at startup: q1..q4 (default: q2).",
    "FOCUS_DEFAULT_LANGUAGE": "Language used until the user toggles it: en or zh (default: en).",
}
