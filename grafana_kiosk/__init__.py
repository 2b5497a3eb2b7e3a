"""Grafana Kiosk - launch Chromium in kiosk mode on a Grafana dashboard."""

__version__ = "1.0.0"
__author__ = "Grafana Kiosk Team"
