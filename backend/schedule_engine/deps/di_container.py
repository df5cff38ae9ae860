"""
Dependency injection container using dependency-injector.
Wires the HTTP client, data source, holiday cache, services and controllers.
"""

from dependency_injector import containers, providers

from schedule_engine.core.config import settings
from schedule_engine.core.integrations.data_source import DataSourceClient
from schedule_engine.core.integrations.http.http_client import HttpClient
from schedule_engine.controllers.availability_controller import AvailabilityController
from schedule_engine.controllers.calendar_controller import CalendarController
from schedule_engine.controllers.health_controller import HealthController
from schedule_engine.controllers.leave_request_controller import LeaveRequestController
from schedule_engine.controllers.weekly_grid_controller import WeeklyGridController
from schedule_engine.services.calendar_service import CalendarService
from schedule_engine.services.health_service import HealthService
from schedule_engine.services.holiday_service import HolidayCache
from schedule_engine.services.leave_request_service import LeaveRequestService
from schedule_engine.services.weekly_grid_service import WeeklyGridService
from schedule_engine.utils.polish_holidays import fetch_polish_holidays


def select_holiday_fetcher(source: str, data_source: DataSourceClient):
    """Remote calendar, or the built-in Polish calendar when source is "local"."""
    if source == "local":
        return fetch_polish_holidays
    return data_source.fetch_holidays


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Configuration
    config = providers.Configuration()

    # Remote data source
    http_client = providers.Singleton(
        HttpClient,
        base_url=config.data_source_url,
        timeout=config.data_source_timeout,
        max_retries=config.data_source_max_retries,
        retry_delay=config.data_source_retry_delay,
    )

    data_source = providers.Singleton(
        DataSourceClient,
        http_client=http_client,
    )

    # One cache per process; reset only through clear()
    holiday_cache = providers.Singleton(
        HolidayCache,
        fetcher=providers.Callable(select_holiday_fetcher, config.holiday_source, data_source),
        default_country=config.default_country,
    )

    # Services
    health_service = providers.Singleton(
        HealthService,
        data_source=data_source,
        holiday_cache=holiday_cache,
    )

    calendar_service = providers.Factory(
        CalendarService,
        data_source=data_source,
        holiday_cache=holiday_cache,
    )

    leave_request_service = providers.Factory(
        LeaveRequestService,
        data_source=data_source,
    )

    weekly_grid_service = providers.Factory(
        WeeklyGridService,
        unit_height=config.weekly_grid_hour_height,
        forward_weeks=config.weekly_grid_forward_weeks,
    )

    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )

    availability_controller = providers.Factory(
        AvailabilityController,
        max_slots=config.max_availability_slots,
    )

    calendar_controller = providers.Factory(
        CalendarController,
        calendar_service=calendar_service,
        holiday_cache=holiday_cache,
    )

    weekly_grid_controller = providers.Factory(
        WeeklyGridController,
        weekly_grid_service=weekly_grid_service,
    )

    leave_request_controller = providers.Factory(
        LeaveRequestController,
        leave_request_service=leave_request_service,
    )


def container_config() -> dict:
    """Provider configuration taken from application settings."""
    return {
        "data_source_url": settings.DATA_SOURCE_URL,
        "data_source_timeout": settings.DATA_SOURCE_TIMEOUT_SECONDS,
        "data_source_max_retries": settings.DATA_SOURCE_MAX_RETRIES,
        "data_source_retry_delay": settings.DATA_SOURCE_RETRY_DELAY_SECONDS,
        "holiday_source": settings.HOLIDAY_SOURCE,
        "default_country": settings.DEFAULT_COUNTRY,
        "max_availability_slots": settings.MAX_AVAILABILITY_SLOTS,
        "weekly_grid_hour_height": settings.WEEKLY_GRID_HOUR_HEIGHT,
        "weekly_grid_forward_weeks": settings.WEEKLY_GRID_FORWARD_WEEKS,
    }


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        _container = Container()
        _container.config.from_dict(container_config())
    return _container
