"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  The storage handle is
built here explicitly and closed by whoever built the container.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from backoffice.domain.exceptions import StorageUnavailableError
from backoffice.domain.service.order_number_generator import OrderNumberGenerator
from backoffice.domain.service.status_policy import TransitionPolicy, policy_named
from backoffice.infrastructure.config import Settings
from backoffice.infrastructure.persistence.database import Database
from backoffice.infrastructure.persistence.sql_category_repository import (
    SqlCategoryRepository,
)
from backoffice.infrastructure.persistence.sql_customer_repository import (
    SqlCustomerRepository,
)
from backoffice.infrastructure.persistence.sql_order_repository import (
    SqlOrderRepository,
)
from backoffice.infrastructure.persistence.sql_product_repository import (
    SqlProductRepository,
)
from backoffice.infrastructure.persistence.sql_stats_repository import (
    SqlStatsRepository,
)

logger = logging.getLogger(__name__)


@dataclass
class Container:

    settings: Settings
    database: Database
    categories: SqlCategoryRepository
    customers: SqlCustomerRepository
    products: SqlProductRepository
    orders: SqlOrderRepository
    stats: SqlStatsRepository
    order_numbers: OrderNumberGenerator
    status_policy: TransitionPolicy

    def close(self) -> None:
        self.database.close()


def build_container(
    settings: Settings | None = None,
    create_schema: bool = True,
) -> Container:
    """Build every collaborator from ``settings``.

    An unreachable database does not stop startup: queries then degrade
    to empty results and commands fail with StorageUnavailableError.
    """
    settings = settings or Settings()
    database = Database(settings.database_url, echo=settings.echo_sql)
    if create_schema:
        try:
            database.create_schema()
        except StorageUnavailableError as exc:
            logger.warning("Storage unavailable at startup: %s", exc)
    return Container(
        settings=settings,
        database=database,
        categories=SqlCategoryRepository(database),
        customers=SqlCustomerRepository(database),
        products=SqlProductRepository(database),
        orders=SqlOrderRepository(database),
        stats=SqlStatsRepository(database),
        order_numbers=OrderNumberGenerator(prefix=settings.order_number_prefix),
        status_policy=policy_named(settings.status_policy),
    )
