from .client_id_service import ClientIdService

__all__ = ["ClientIdService"]
