"""Desktop session preparation for the kiosk browser."""

from .lxde import initialize_lxde

__all__ = ["initialize_lxde"]
