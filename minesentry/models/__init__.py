"""
Pydantic models for request/response validation.

DESIGN PRINCIPLE:
- Models reflect data structure, not business logic
- Keep models simple and focused on validation
- Server-owned fields (ids, timestamps, vote counters) never come from clients
"""
