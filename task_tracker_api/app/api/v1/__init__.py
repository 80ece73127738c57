"""Version 1 of the Task Tracker API."""
