"""
IgniteAI idea evaluation backend.

Turns a free-text business idea into a validated structured analysis and an
illustrative hero image using Google Gemini.
"""

__version__ = "0.1.0"
