from typing import Any

import sentry_sdk
from dependency_injector.wiring import Provide, inject
from loguru import logger

from ga_tracker.containers import Application
from ga_tracker.log import LogHandler
from ga_tracker.settings import Settings
from ga_tracker.tracker import TrackerService


def create_tracker(app: Application | None = None) -> TrackerService:
    """Build a ``TrackerService`` from the environment settings.

    Sets up logging and Sentry on the way, so call it once per process.
    """
    if app is None:
        app = Application()
    app.wire(modules=[__name__])

    return _setup()


@inject
def _setup(
    settings: Settings
    | dict[str, Any] = Provide[Application.core.settings],  # pylint: disable=no-member
    log_handler: LogHandler = Provide[Application.core.log_handler],  # pylint: disable=no-member
    tracker_service: TrackerService = Provide[
        Application.services.tracker  # pylint: disable=no-member
    ],
) -> TrackerService:
    log_handler.setup()

    # There's a bug where configurations are passed as a dict, so we attempt to pass it
    # here. See https://github.com/ets-labs/python-dependency-injector/issues/593
    if isinstance(settings, dict):
        settings = Settings(**settings)

    if settings.sentry_dsn is not None:
        sentry_sdk.init(settings.sentry_dsn, traces_sample_rate=0.8)
    else:
        logger.warning("SENTRY_DSN not set")

    return tracker_service
