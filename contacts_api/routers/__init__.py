"""
HTTP routers for the contacts service.

Each module exposes a router that app.py includes; today that is the GraphQL
router in contacts.py.
"""
