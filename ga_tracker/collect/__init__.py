from .collect_repository import CollectRepository
from .collect_service import CollectService

__all__ = ["CollectRepository", "CollectService"]
