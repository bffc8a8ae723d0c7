"""
Tweet Service
------------
Publishes tweets with optional media on behalf of callers who supply their
own Twitter credentials.
"""

__version__ = "1.0.0"
