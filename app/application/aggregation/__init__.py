"""
Application layer for the aggregation bounded context.
"""
