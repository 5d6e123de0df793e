"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskFilter)
- task_store.py: in-memory task list mirrored to a KeyValueStore
"""
