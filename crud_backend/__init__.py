"""
CRUD Backend

Generic create/read/update/delete/search/soft-delete service layer over a
document store, with caching, activity auditing and lifecycle events.
"""

__version__ = "0.1.0"
