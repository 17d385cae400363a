"""
Use cases for the contacts service.

Routers (GraphQL resolvers) call these functions instead of talking to a
repository directly.
"""
