# rusuku/core/__init__.py
# Pure core: timer state machine, grid border plan & render model (no I/O)
