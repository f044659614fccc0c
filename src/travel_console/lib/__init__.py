"""
Local library modules shared across the console.

Modules:
    logs: Logging utilities
    objects: Stable hashing and JSON serialization
    paths: Cache and temp directory helpers
    clients: httpx client factory for the remote API
    caches: Disk-based caching with TTL support
"""

from travel_console.lib import caches, clients, logs, objects, paths

__all__ = ["caches", "clients", "logs", "objects", "paths"]
