"""Model for service details error response."""

from typing import Optional

from pydantic import BaseModel, Field


class ServiceDetailsError(BaseModel):
    """Model for service details error response."""
    error: str = Field(..., description="Error kind (e.g. 'HTTP 500', 'MissingField')")
    message: str = Field(..., description="Detailed error description")
    field: Optional[str] = Field(default=None, description="Feed field involved, for parsing errors")
