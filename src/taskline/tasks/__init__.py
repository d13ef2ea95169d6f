"""
Task subsystem.

Components:
- task_models.py: data structures (Task, ToDo, Deadline, Event, TaskKind)
- task_list.py: ordered in-memory container with 1-based indexing
- task_store.py: flat text file storage (one task per line)
"""
