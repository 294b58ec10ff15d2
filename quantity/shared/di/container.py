from dependency_injector import containers, providers

from quantity.adapters.outbound.registry.in_memory import InMemoryTokenRegistry
from quantity.app.queries.check_quantity_of import IsQuantityOfQueryHandler
from quantity.domain.services.factory import QuantityFactory
from quantity.domain.services.precision_service import (
    PrecisionPolicy,
    PrecisionService,
)
from quantity.shared.config import Settings, get_settings
from quantity.shared.logging import get_logger

logger = get_logger(__name__)


class Container(containers.DeclarativeContainer):
    config = providers.Configuration()

    precision_policy = providers.Singleton(
        PrecisionPolicy,
        division_denomination=config.division_denomination,
        strict_parsing=config.strict_precision,
    )

    precision_service = providers.Singleton(
        PrecisionService,
        policy=precision_policy,
    )

    quantity_factory = providers.Singleton(
        QuantityFactory,
        precision_service=precision_service,
        default_denomination=config.default_denomination,
    )

    token_registry = providers.Singleton(InMemoryTokenRegistry)

    is_quantity_of_query_handler = providers.Factory(
        IsQuantityOfQueryHandler,
        token_registry=token_registry,
    )


def get_container(settings: Settings = None) -> Container:
    settings = settings or get_settings()

    container = Container()

    container.config.from_dict(
        {
            "default_denomination": settings.DEFAULT_DENOMINATION,
            "division_denomination": settings.DIVISION_DENOMINATION,
            "strict_precision": settings.STRICT_PRECISION,
        }
    )

    logger.info(
        "di_container_configured",
        default_denomination=settings.DEFAULT_DENOMINATION,
        strict_precision=settings.STRICT_PRECISION,
    )

    return container
