"""Pydantic schemas for conversion service responses."""

from typing import Any, Optional
from pydantic import BaseModel


class ConversionErrorResponse(BaseModel):
    """Error body returned by the conversion service on failure."""
    error: Optional[str] = None
    detail: Optional[Any] = None

    def message(self) -> Optional[str]:
        """Return the server-supplied error text, if any."""
        if self.error and self.error.strip():
            return self.error.strip()
        if isinstance(self.detail, str) and self.detail.strip():
            return self.detail.strip()
        return None
