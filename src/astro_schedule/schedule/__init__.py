"""
Schedule subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_factory.py: validating construction from raw text
- task_store.py: conflict-free, time-ordered in-memory store
- notifier.py: change notifications for listeners
- errors.py: recoverable error kinds
"""
