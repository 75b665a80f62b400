"""API HTTP — create_app() construit l'application FastAPI."""
