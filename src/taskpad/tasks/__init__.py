"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskKind) and the persisted line format
- task_list.py: ordered 1-indexed task collection
- task_parser.py: turns command lines into tasks / list operations
- task_store.py: flat text file storage
- errors.py: typed user-input and storage errors
"""
