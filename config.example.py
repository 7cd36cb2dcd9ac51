# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in log messages (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level: DEBUG/INFO/WARNING/ERROR (default: INFO).",
    "TASKLIST_LOG_DIR": "Directory for tasklist.log (default: .local/tasklist).",
    "TASKLIST_LOG_TO_FILE": "Write a DEBUG log file into TASKLIST_LOG_DIR (true/false, default: true).",
    # Task store
    "TASKLIST_ID_MODE": "Task identifiers: numeric (1, 2, 3, ...) or token (short hex ids). Default: numeric.",
    # Console
    "TASKLIST_PROMPT": 'Prompt written before each command (default: "> ").',
}
