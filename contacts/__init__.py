"""Campus contacts: person records and their persistence adapters."""

__version__ = "0.1.0"
