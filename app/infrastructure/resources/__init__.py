"""
Infrastructure adapters for the resources bounded context.
"""
