"""
Pydantic schema definitions for API payloads.

The ``Todo`` model doubles as the value type held by the stores.
"""
