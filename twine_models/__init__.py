"""Heat exchanger relations and thermodynamic property models."""

__version__ = "0.1.0"