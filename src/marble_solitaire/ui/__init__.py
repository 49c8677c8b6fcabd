"""PyQt6 front end: board rendering, input and status panels."""
