"""
Domain package - documents, value objects and business services.
"""
