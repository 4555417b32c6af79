"""
Resources bounded context — domain layer.

Keyed vehicle resources (bicycles, boats) with create, read,
update and delete semantics based on the existence of an id.
"""
