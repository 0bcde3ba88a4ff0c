"""HTTP API for the character sheet server."""
