"""
Services layer - logic that sits beside the storage engine.

DESIGN PRINCIPLE:
- Services contain domain logic, NOT routes
- Hotspots and predictions are display aids; they never touch stored records
"""
