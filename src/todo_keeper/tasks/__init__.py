"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter)
- task_store.py: in-memory collection + mutation/query operations
"""
