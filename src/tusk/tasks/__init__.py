"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Account)
- task_store.py: in-memory store with the add/delete/complete/uncomplete/list/clear operations
- persistence.py: JSON file load/save for the whole store
- errors.py: tagged errors shared by the store, persistence and the CLI
"""
