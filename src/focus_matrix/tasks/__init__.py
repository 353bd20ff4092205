"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Quadrant)
- task_store.py: ordered collection persisted to the key-value store on every change
"""
