from datetime import datetime
from typing import Optional, Dict, Any
from pydantic import BaseModel

class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    details: Optional[Dict[str, Any]] = None
