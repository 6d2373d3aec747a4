"""
Endpoint modules.

``records`` builds the CRUD router for a record collection;
``wedding`` serves the wedding details and dashboard summary.
"""
