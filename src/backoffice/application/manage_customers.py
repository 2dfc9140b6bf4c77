"""Application services: Customer use cases."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from backoffice.application._degrade import degrade_on_unavailable
from backoffice.domain.exceptions import NotFoundError
from backoffice.domain.model.customer import Customer
from backoffice.domain.repository.customer_repository import CustomerRepository

logger = logging.getLogger(__name__)


class ListCustomersHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    @degrade_on_unavailable(list)
    def handle(self, search_term: str | None = None) -> list[Customer]:
        """Newest first; a term matching nothing gives an empty list."""
        return self._customer_repo.list_all(search_term=search_term or None)


class ShowCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer #{customer_id} not found")
        return customer


class AddCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, name: str, **details: object) -> Customer:
        """Register a customer; ``details`` are the optional contact fields."""
        customer = Customer.create(name, **details)
        self._customer_repo.save(customer)
        logger.info("Added customer #%s '%s'", customer.id, customer.name)
        return customer


class UpdateCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int, changes: Mapping[str, object]) -> Customer:
        customer = self._customer_repo.get_by_id(customer_id)
        if customer is None:
            raise NotFoundError(f"Customer #{customer_id} not found")
        customer.update(changes)
        self._customer_repo.save(customer)
        return customer


class DeleteCustomerHandler:

    def __init__(self, customer_repo: CustomerRepository) -> None:
        self._customer_repo = customer_repo

    def handle(self, customer_id: int) -> None:
        """Hard delete.

        Fails with ReferentialIntegrityError while any order references
        the customer; the orders are left untouched.
        """
        if not self._customer_repo.delete(customer_id):
            raise NotFoundError(f"Customer #{customer_id} not found")
        logger.info("Deleted customer #%s", customer_id)
