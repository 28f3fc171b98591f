# rusuku/ui/__init__.py
# Dashboard UI: rich components, theming & the full-screen dashboard
