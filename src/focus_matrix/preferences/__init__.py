"""
User preferences persisted next to the task collection.

Components:
- language.py: display language (en/zh) with load/set/toggle
"""
