"""Utility modules for the Grafana kiosk launcher."""
