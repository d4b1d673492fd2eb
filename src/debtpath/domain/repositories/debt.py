"""Debt repository protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ...models.debt import Debt


class DebtRepository(Protocol):
    """Source of debt records supplied by the persistence layer."""

    def get_by_id(self, debt_id: str) -> Optional[Debt]:
        """Retrieve a debt by ID."""
        ...

    def list_all(self) -> list[Debt]:
        """List all debts, ordered by ``sort_order``."""
        ...

    def list_active(self) -> list[Debt]:
        """List active debts with a positive balance."""
        ...
