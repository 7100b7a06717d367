# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
None of these settings change how commands behave; they only affect the banner and logging.
Tasks are never written to disk.
"""

ENV_VARS = {
    # App
    "TASKS_APP_NAME": "Name shown in the welcome banner (default: Terminal Task Manager).",
    "TASKS_SHOW_BANNER": "Print welcome line + help at startup (true/false, default: true).",
    # Logging (stderr + optional file; stdout is reserved for the session)
    "TASKS_LOG_LEVEL": "Console log level: DEBUG/INFO/WARNING/ERROR/CRITICAL (default: WARNING).",
    "TASKS_LOG_FILE": "Optional path; when set, full DEBUG logs are written there.",
}
