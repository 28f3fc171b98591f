# rusuku/config/__init__.py
# Read-only dashboard settings
