# models/document.py

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field

from .enums import DocumentType


class Document(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    type: DocumentType
    url: str
    size: int = Field(..., description="File size in bytes")
    uploaded_by: str = Field(..., description="User ID who uploaded the document")
    property_id: Optional[str] = None
    tenant_id: Optional[str] = None
    service_request_id: Optional[str] = None
    created_at: datetime
    tags: List[str] = Field(default_factory=list)
