"""
API package containing the HTTP routes.

``router`` aggregates the endpoint modules and is included by
``create_app``.
"""
