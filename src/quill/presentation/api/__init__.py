"""FastAPI REST interface."""
