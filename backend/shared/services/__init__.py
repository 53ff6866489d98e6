"""
Shared services module

Import services by their direct module path, e.g.
    from shared.services.service_factory import create_fastapi_service
"""
