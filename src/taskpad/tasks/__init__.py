"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter)
- task_store.py: SQLite-backed storage + live snapshot feed
- task_filter.py: client-side pending/completed partition
- task_api.py: small helpers used by commands and the console
"""
