"""HR and payroll domain store with derived reporting views."""

__version__ = "0.1.0"
