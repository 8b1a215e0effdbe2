# promptvault/__init__.py
"""
PromptVault: a local, versioned prompt store.
"""

__version__ = "0.1.0"
