"""Application service: Delete Product use case.

Existing orders keep their own copy of the product name, quantity and
price, so removing a product from the catalog leaves them intact.
"""

from __future__ import annotations

import logging

from freshcart.domain.exceptions import EntityNotFoundError
from freshcart.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> None:
        if not self._product_repo.delete(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        logger.info("Product #%s deleted", product_id)
