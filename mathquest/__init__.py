"""
Math Quest - AI-generated math word problems with encouraging feedback
"""

__version__ = "1.0.0"
