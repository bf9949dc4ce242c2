# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name used in the greeting (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: WARNING). The log file always gets DEBUG.",
    "TASKPAD_LOG_TO_FILE": "Write <log_dir>/taskpad.log (true/false, default: true).",
    # Paths
    "TASKPAD_DATA_DIR": "Local data directory (default: data).",
    "TASKPAD_TASKS_PATH": "Saved task list (default: <data_dir>/tasks.txt).",
    "TASKPAD_LOG_DIR": "Log directory (default: <data_dir>/logs).",
}
