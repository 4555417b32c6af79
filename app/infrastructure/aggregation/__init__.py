"""
Infrastructure adapters for the aggregation bounded context.
"""
