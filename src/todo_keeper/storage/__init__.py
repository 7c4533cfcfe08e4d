"""
Storage subsystem.

Components:
- kv_store.py: SQLite-backed key-value store (string keys and values)
- persistence.py: task collection and theme adapters over a key-value store
"""
