"""
Health check response schemas.
"""

from pydantic import BaseModel
from typing import Dict, Any, List


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str
    uptime: str
    version: str
    checks: Dict[str, Any] = {}
    cached_holiday_sets: List[str] = []
