"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Acknowledgement carrying a human-readable message."""

    message: str
