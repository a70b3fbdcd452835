"""Core protocols, value types and errors shared by executor implementations."""
