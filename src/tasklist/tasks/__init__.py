"""
Task subsystem.

Components:
- task_models.py: identifiers, deadlines, Task and listing shapes
- task_store.py: in-memory TaskList (projects -> tasks) + queries/mutations
- task_api.py: text rendering of the listings used by commands
- errors.py: domain and command error kinds
"""
