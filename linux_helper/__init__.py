"""
Linux Helper
============

A terminal knowledge base for installing, using and troubleshooting Linux:
searchable error reference, guide accordions, a troubleshooting checklist
and copyable command blocks.
"""

__version__ = "0.1.0"
