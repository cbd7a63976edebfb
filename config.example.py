# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAL_APP_NAME": "Name the bot greets with (default: Duke).",
    "TASKPAL_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKPAL_FILE_LOGGING": "Write full debug logs to <log_dir>/taskpal.log (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAL_DATA_DIR": "Local data directory (default: .local/taskpal).",
    "TASKPAL_TASKS_PATH": "Task store file (default: <data_dir>/tasks.txt).",
    "TASKPAL_LOG_DIR": "Log directory (default: <data_dir>).",
}
