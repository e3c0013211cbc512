"""
Application package initializer.

The contact pipeline is split into layers: ``schemas`` validates
untrusted input, ``services`` talks to the SQLite store, ``actions``
turns one submission into one validated mutation with a uniform
result, and ``api`` exposes all of it over HTTP.
"""

from .main import app  # noqa: F401
