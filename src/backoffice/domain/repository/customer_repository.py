"""Abstract repository for Customer aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from backoffice.domain.model.customer import Customer

# Text fields matched by the customer search term.
SEARCH_FIELDS = ("name", "email", "phone", "document")


class CustomerRepository(ABC):

    @abstractmethod
    def list_all(self, search_term: str | None = None) -> list[Customer]:
        """Return customers newest-first.

        With ``search_term``, keep rows where any of ``SEARCH_FIELDS``
        contains it, case-insensitively.
        """

    @abstractmethod
    def get_by_id(self, customer_id: int) -> Customer | None:
        """Return a customer by its ID, or None if not found."""

    @abstractmethod
    def save(self, customer: Customer) -> None:
        """Persist a new or updated customer; assigns ``id`` on insert."""

    @abstractmethod
    def delete(self, customer_id: int) -> bool:
        """Hard-delete a customer. Returns False if no row matched.

        Raises ReferentialIntegrityError while orders still reference it.
        """
