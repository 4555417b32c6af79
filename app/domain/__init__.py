"""
Domain layer package.

Entities, port interfaces and errors for the resources and
aggregation contexts. No framework imports, no IO.
"""
