"""
Shared module package.

Cross-cutting concerns used by both services:
- Error taxonomy, translation and handlers
- Security headers and rate limiting
- Logging configuration
"""
