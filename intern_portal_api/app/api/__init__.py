"""
API package containing the portal routes.

``router.py`` aggregates the endpoint modules into a single router
that ``main.create_app`` mounts under the ``/api`` prefix.
"""
