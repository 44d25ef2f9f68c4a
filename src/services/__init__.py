"""Business logic services used by handlers.

Services are imported lazily by handlers so a cold start does not open an
HTTP session before a route needs it.
"""
