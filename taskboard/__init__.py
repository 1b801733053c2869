"""
Taskboard: task management API with token-based authentication.
"""

__version__ = "1.0.0"
