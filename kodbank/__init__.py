"""Kodbank: demo banking API with cookie-based session auth."""
