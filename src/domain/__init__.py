"""
Domain layer for SMS validation and dispatch.

This layer contains:
- Data models (the parsed SMS request)
- Error taxonomy (fixed user-facing messages)
- Business logic (extract, validate, dispatch pipeline)
"""
