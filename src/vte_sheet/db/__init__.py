"""
Data access for the sheet server.

Modules:
    catalog: YAML-backed trait/template/path catalog (read-only).
    store: In-memory character store (no persistence).
"""
