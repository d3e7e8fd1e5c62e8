"""
Utility functions for the application.
"""
from typing import Any, Dict, Optional
from datetime import date


def serialize_day(day: date) -> str:
    """Serialize a calendar day as an ISO ``YYYY-MM-DD`` string."""
    return day.isoformat()


def format_error(kind: str, message: str, details: Optional[Any] = None) -> Dict[str, Any]:
    """Format error response."""
    response = {"error": kind, "message": message}
    if details:
        response["details"] = details
    return response
