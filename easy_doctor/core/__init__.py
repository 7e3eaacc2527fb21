"""
Core types for the Easy Doctor system.
"""
