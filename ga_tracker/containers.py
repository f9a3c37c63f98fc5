# pylint: disable=no-member


from dependency_injector import containers, providers
from requests import Session
from slack_sdk import WebClient as SlackClient

from ga_tracker.client_id import ClientIdService
from ga_tracker.collect import CollectRepository, CollectService
from ga_tracker.hit import HitBuilder
from ga_tracker.log import InterceptLoggingHandler, LogHandler
from ga_tracker.report import EmailReportRepository, ReportService, SlackReportRepository
from ga_tracker.settings import Settings
from ga_tracker.tracker import TrackerService


class Core(containers.DeclarativeContainer):
    settings = providers.Configuration(pydantic_settings=[Settings()])

    intercept_logging_handler = providers.Singleton(InterceptLoggingHandler)
    log_handler = providers.Singleton(
        LogHandler, intercept_logging_handler=intercept_logging_handler
    )


class Clients(containers.DeclarativeContainer):
    _settings = providers.Configuration(pydantic_settings=[Settings()])

    _session = Session()
    _session.hooks = {
        "response": lambda r, *_args, **_kwargs: r.raise_for_status()  # pragma: no cover
    }

    api = providers.Object(_session)
    slack = providers.Singleton(SlackClient, token=_settings.slack_token)


class Repositories(containers.DeclarativeContainer):
    _settings = providers.Configuration(pydantic_settings=[Settings()])
    clients = providers.DependenciesContainer()

    collect = providers.Singleton(
        CollectRepository, api_client=clients.api, timeout=_settings.request_timeout
    )
    email_report = providers.Singleton(
        EmailReportRepository,
        smtp_host=_settings.smtp_host,
        smtp_port=_settings.smtp_port,
        sender=_settings.smtp_sender,
        timeout=_settings.request_timeout,
    )
    slack_report = providers.Singleton(
        SlackReportRepository, slack_client=clients.slack, channel=_settings.slack_channel
    )


class Services(containers.DeclarativeContainer):
    _settings = providers.Configuration(pydantic_settings=[Settings()])
    repositories = providers.DependenciesContainer()

    client_id = providers.Singleton(ClientIdService)
    hit_builder = providers.Singleton(HitBuilder)

    report = providers.Singleton(
        ReportService,
        email_report_repository=repositories.email_report,
        slack_report_repository=repositories.slack_report,
    )
    collect = providers.Singleton(
        CollectService, collect_repository=repositories.collect, report_service=report
    )
    tracker = providers.Singleton(
        TrackerService,
        client_id_service=client_id,
        hit_builder=hit_builder,
        collect_service=collect,
        tracking_id=_settings.ga_tracking_id,
        report_address=_settings.report_email,
    )


class Application(containers.DeclarativeContainer):
    core = providers.Container(Core)
    clients = providers.Container(Clients)
    repositories = providers.Container(Repositories, clients=clients)
    services = providers.Container(Services, repositories=repositories)
