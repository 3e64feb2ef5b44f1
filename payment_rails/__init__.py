"""Payment rail selection, rail validation and NACHA ACH file codec."""

__version__ = "0.1.0"
