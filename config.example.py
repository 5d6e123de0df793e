# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASK_TRACKER_APP_NAME": "App display name, also the HTML export title (default: task-tracker).",
    "TASK_TRACKER_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Storage
    "TASK_TRACKER_STORAGE": "Key-value backend: sqlite | json | memory (default: sqlite).",
    "TASK_TRACKER_STORAGE_PATH": (
        "Backend file (default: <data_dir>/storage.sqlite3, or <data_dir>/storage.json for json)."
    ),
    # Paths (gitignored)
    "TASK_TRACKER_DATA_DIR": "Local data directory, also holds task-tracker.log (default: .local/task-tracker).",
    "TASK_TRACKER_EXPORT_PATH": "Default target of /export (default: <data_dir>/tasks.html).",
}
