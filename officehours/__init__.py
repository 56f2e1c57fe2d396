"""
officehours - weekly office hours and lecturer availability.
"""

__version__ = "0.1.0"
