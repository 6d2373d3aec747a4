"""
API package containing the REST routes.

``router.py`` exposes the top-level ``router`` which includes the CRUD
routers for every record collection and the wedding/summary routes.
"""
