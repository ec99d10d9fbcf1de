from pydantic import BaseModel, Field
from datetime import datetime
from signage.models.role import TenantRole


class TenantResponse(BaseModel):
    """Tenant details response"""

    id: int
    subject: str
    display_name: str
    role: TenantRole
    active: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ProfileUpdate(BaseModel):
    """Update the caller's own display name"""

    display_name: str = Field(..., min_length=1, max_length=255)


class TenantIdRequest(BaseModel):
    """Target tenant for admin operations"""

    tenant_id: int = Field(..., gt=0)
