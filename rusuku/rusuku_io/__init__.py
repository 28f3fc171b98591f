# rusuku/rusuku_io/__init__.py
# Terminal & filesystem I/O: shared console, JSON reads, key polling
