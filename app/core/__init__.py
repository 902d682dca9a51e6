"""Core application wiring: settings, logging, handlers and middleware."""
