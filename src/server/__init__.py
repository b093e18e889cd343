"""HTTP API exposing the outline engine and the user record store."""
