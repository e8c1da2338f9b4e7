"""
Application layer - wiring and orchestration of document factories.
"""
