from .exceptions import HitInfoTypeError, TrackerServiceError, UnknownMethodError
from .models import TrackingConfig
from .tracker_service import TrackerService

__all__ = [
    "HitInfoTypeError",
    "TrackerService",
    "TrackerServiceError",
    "TrackingConfig",
    "UnknownMethodError",
]
