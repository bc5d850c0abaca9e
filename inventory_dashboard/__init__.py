"""Inventory dashboard: catalog statistics, charts and product search"""

__version__ = "1.0.0"
