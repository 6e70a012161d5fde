"""HTTP gateway proxying user management and place lookups for the front-end."""

__version__ = "0.1.0"
