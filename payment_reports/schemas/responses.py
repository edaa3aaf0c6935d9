"""
Response Schemas - Common response bodies for the Payment Reports API
"""

from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response"""
    success: bool = False
    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str = "payment-reports"
