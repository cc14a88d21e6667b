"""
Adl - Keep a numbered log of Architecture Decision Records.

A CLI tool that:
1. Creates new ADR files from a template, numbered by creation order
2. Regenerates the ADR index (adr/README.md) from the files on disk

Usage:
    adl                        # Show help
    adl create Name of ADR     # Create adr/NNNNN-Name-of-ADR.md and refresh the index
    adl regen                  # Rebuild adr/README.md
"""

__version__ = "0.1.0"
__author__ = "Adl"
