"""
Local persistence.

Components:
- kv_store.py: key-value backends (SQLite table, atomic JSON file) + open_kv_store()
"""
