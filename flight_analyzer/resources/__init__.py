"""Bundled ticket data used when no tickets file is configured."""
