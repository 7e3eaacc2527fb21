"""
Easy Doctor core: session continuity and doctor booking roster.
"""

__version__ = "1.0.0"
