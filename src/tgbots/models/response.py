"""
Response record returned by the HTTP client.
"""

from typing import Any, Optional
from pydantic import BaseModel


class Response(BaseModel):
    model_config = {"frozen": True}

    method: str
    result: Any = None
    status_code: int = 200
    elapsed: Optional[float] = None  # seconds
