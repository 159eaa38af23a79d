"""
Dockside — vessel cargo management console and animal registry API.
"""

__version__ = "0.1.0"
