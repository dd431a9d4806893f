# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKPAD_APP_NAME": "App display name (default: taskpad).",
    "TASKPAD_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Connectors
    "TASKPAD_CONSOLE_ENABLED": "Run the interactive console (true/false, default: true).",
    # Paths (gitignored)
    "TASKPAD_DATA_DIR": "Local data directory, also holds taskpad.log (default: .local/taskpad).",
    "TASKPAD_TASKS_DB_PATH": "TaskStore SQLite path (default: <data_dir>/tasks.sqlite3).",
    # Reminders
    "TASKPAD_NOTIFICATIONS_ENABLED": (
        "Permission to post reminders (true/false, default: true). false disables the reminder loop."
    ),
    "TASKPAD_REMINDER_INTERVAL_SECONDS": "Seconds between reminders (default: 300, minimum 1).",
    "TASKPAD_REMINDER_CHANNEL_ID": "Notification channel id (default: task_reminder_channel).",
    "TASKPAD_REMINDER_CHANNEL_NAME": "Notification channel name (default: Task reminders).",
    "TASKPAD_REMINDER_CHANNEL_DESCRIPTION": "Notification channel description.",
    "TASKPAD_REMINDER_TITLE": "Reminder title (default: Task reminder).",
    "TASKPAD_REMINDER_BODY": "Reminder text (default: Remember to complete your pending tasks.).",
}
