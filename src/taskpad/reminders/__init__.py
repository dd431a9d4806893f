"""
Reminder subsystem.

- reminder_loop.py: fixed-interval loop that fires one static notification,
  plus a runner that hosts it on a background thread.
"""
