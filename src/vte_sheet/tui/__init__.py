"""
Terminal character sheet client.

A Textual application that fetches an allocated sheet from the API server
and renders it as grids of dot, text and dropdown widgets. Edits are pushed
back to the server as they happen.

Usage:
    vte-sheet-tui --server http://localhost:8000 --character demo
"""
