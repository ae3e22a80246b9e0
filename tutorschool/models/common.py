"""
Common response models.

Dependencies: pydantic
System role: Response structures shared by several routers
"""

from pydantic import BaseModel


class DeleteResponse(BaseModel):
    """Acknowledgement for delete operations."""

    deleted: bool = True
    id: str
