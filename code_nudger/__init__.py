"""
code-nudger - reminder annotations for source code.
"""

__version__ = "0.1.0"
