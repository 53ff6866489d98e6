"""
Response models for locale-shell services

Standardized envelope used by service-level endpoints (/health).
The i18n payloads themselves are returned bare to match the frontend contract.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ApiResponse:
    """Standardized API response model"""

    status: str
    message: str
    data: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON response"""
        result = {"status": self.status, "message": self.message}
        if self.data is not None:
            result["data"] = self.data
        return result

    @classmethod
    def health_check(
        cls, service_name: str, version: str, description: Optional[str] = None
    ) -> "ApiResponse":
        """Create standardized health check response"""
        health_data = {"service": service_name, "version": version, "status": "healthy"}
        if description:
            health_data["description"] = description

        return cls(status="success", message="Service is healthy", data=health_data)

