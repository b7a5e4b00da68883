"""
hello-llm: ask one of several text-generation providers for a short hello.
"""

__version__ = "0.1.0"
