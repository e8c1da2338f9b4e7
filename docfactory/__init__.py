"""
Document factory service.
Factory Method example for Word, PDF and Excel document stand-ins.
"""

__version__ = "1.0.0"
