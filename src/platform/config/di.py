"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from datetime import datetime, timezone

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.content_store.sanity_client import SanityContentStoreClient
from src.service.calendar.app.dto.calendar_config import CalendarConfig
from src.service.content.driven_adapter.repo.content_search_repo_impl import (
    ContentSearchRepoImpl,
)
from src.service.content.driven_adapter.repo.news_query_repo_impl import NewsQueryRepoImpl
from src.service.shared_kernel.app.best_effort_notifier import BestEffortNotifier
from src.service.shared_kernel.app.interface.i_email_sender import IEmailSender
from src.service.shared_kernel.driven_adapter.email.email_template_renderer import (
    EmailTemplateRenderer,
)
from src.service.shared_kernel.driven_adapter.email.log_only_email_sender_impl import (
    LogOnlyEmailSender,
)
from src.service.shared_kernel.driven_adapter.email.resend_email_sender_impl import (
    ResendEmailSender,
)
from src.service.shop.app.dto.checkout_policy import CheckoutPolicy
from src.service.shop.driven_adapter.notification.order_email_notifier_impl import (
    OrderEmailNotifierImpl,
)
from src.service.ticketing.app.dto.booking_policy import BookingPolicy
from src.service.ticketing.driven_adapter.notification.booking_email_notifier_impl import (
    BookingEmailNotifierImpl,
)
from src.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.match_inventory_command_repo_impl import (
    MatchInventoryCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.match_query_repo_impl import MatchQueryRepoImpl


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def build_content_store_reader(settings: Settings) -> SanityContentStoreClient:
    """Token-less client; may read through the CDN."""
    return SanityContentStoreClient(
        project_id=settings.SANITY_PROJECT_ID,
        dataset=settings.SANITY_DATASET,
        api_version=settings.SANITY_API_VERSION,
        use_cdn=settings.SANITY_USE_CDN,
        timeout=settings.CONTENT_STORE_TIMEOUT,
    )


def build_content_store_writer(settings: Settings) -> SanityContentStoreClient:
    """Token-carrying client; always talks to the live API."""
    token = settings.SANITY_API_TOKEN.get_secret_value() if settings.SANITY_API_TOKEN else None
    return SanityContentStoreClient(
        project_id=settings.SANITY_PROJECT_ID,
        dataset=settings.SANITY_DATASET,
        api_version=settings.SANITY_API_VERSION,
        token=token,
        use_cdn=False,
        timeout=settings.CONTENT_STORE_TIMEOUT,
    )


def build_email_sender(settings: Settings) -> IEmailSender:
    if not settings.has_resend_api_key:
        return LogOnlyEmailSender()
    return ResendEmailSender(
        api_key=settings.RESEND_API_KEY.get_secret_value(),  # type: ignore[union-attr]
        api_url=settings.RESEND_API_URL,
        timeout=settings.EMAIL_TIMEOUT,
    )


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)
    clock = providers.Object(utc_now)

    # Content store clients (Sanity)
    content_store_reader = providers.Singleton(build_content_store_reader, settings=config_service)
    content_store_writer = providers.Singleton(build_content_store_writer, settings=config_service)

    # Email
    email_sender = providers.Singleton(build_email_sender, settings=config_service)
    email_renderer = providers.Singleton(
        EmailTemplateRenderer,
        club_name=config_service.provided.CLUB_NAME,
        support_email=config_service.provided.SUPPORT_EMAIL,
        clock=clock,
    )
    best_effort_notifier = providers.Singleton(BestEffortNotifier, email_sender=email_sender)

    # Use case settings
    booking_policy = providers.Singleton(
        BookingPolicy,
        write_enabled=config_service.provided.has_sanity_write_token,
        max_claim_attempts=config_service.provided.INVENTORY_MAX_ATTEMPTS,
    )
    checkout_policy = providers.Singleton(
        CheckoutPolicy, shipping_fee=config_service.provided.SHIPPING_FEE
    )
    calendar_config = providers.Singleton(
        CalendarConfig,
        club_name=config_service.provided.CLUB_NAME,
        uid_domain=config_service.provided.CALENDAR_UID_DOMAIN,
        match_duration_hours=config_service.provided.MATCH_DURATION_HOURS,
    )

    # Ticketing (reads through the reader, inventory and bookings through the writer)
    match_query_repo = providers.Singleton(MatchQueryRepoImpl, content_store=content_store_reader)
    match_inventory_command_repo = providers.Singleton(
        MatchInventoryCommandRepoImpl, content_store=content_store_writer
    )
    booking_command_repo = providers.Singleton(
        BookingCommandRepoImpl, content_store=content_store_writer
    )
    booking_notifier = providers.Singleton(
        BookingEmailNotifierImpl,
        notifier=best_effort_notifier,
        renderer=email_renderer,
        sender_address=config_service.provided.SUPPORT_EMAIL,
        admin_address=config_service.provided.ADMIN_EMAIL,
    )

    # Shop
    order_notifier = providers.Singleton(
        OrderEmailNotifierImpl,
        notifier=best_effort_notifier,
        renderer=email_renderer,
        sender_address=config_service.provided.SHOP_EMAIL_FROM,
        admin_address=config_service.provided.ADMIN_EMAIL,
    )

    # Content
    news_query_repo = providers.Singleton(NewsQueryRepoImpl, content_store=content_store_reader)
    content_search_repo = providers.Singleton(
        ContentSearchRepoImpl, content_store=content_store_reader
    )


container = Container()


async def close_resources() -> None:
    """Close the HTTP clients held by singleton adapters."""
    await container.content_store_reader().aclose()
    await container.content_store_writer().aclose()
    await container.email_sender().aclose()
