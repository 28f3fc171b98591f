"""Terminal dashboard with a pausable elapsed-time header & a seamlessly ruled grid body."""

__version__ = "0.1.0"
