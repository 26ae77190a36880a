"""Naming-service backends.

Each module implements `core.interfaces.naming_service.NamingService`.
"""

from adapters.naming_services.das import DasService

__all__ = [
	"DasService",
]
