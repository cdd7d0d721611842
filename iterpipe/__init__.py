"""
``iterpipe``
============

Provides helpers for consuming one-shot streams with plain Python
for-loops and callbacks, failing loudly if a stream is traversed twice.
"""
from ._version import __version__
from .base import StreamConsumedError
from .iterate import Iterate, once, through
from .stream import Stream, streamed


__all__ = [
    "__version__",
    "Iterate",
    "Stream",
    "StreamConsumedError",
    "once",
    "streamed",
    "through",
]
