"""
HTTP adapter.

Decodes JSON requests, runs a search strategy and encodes the result.
"""
