"""
API package containing the HTTP routes.

``router`` in :mod:`.router` includes every endpoint module; the
application factory mounts it at the root path.
"""
