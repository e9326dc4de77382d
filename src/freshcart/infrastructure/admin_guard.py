"""Administrator check for catalog edits and order management.

Stands in for the storefront's session cookie: the caller presents a
token and it must equal the configured ``FRESHCART_ADMIN_TOKEN``.
With no token configured every administrative action is refused.
"""

from __future__ import annotations

import hmac

from freshcart.domain.exceptions import AuthorizationError


class TokenAdminGuard:

    def __init__(self, expected_token: str | None) -> None:
        self._expected_token = expected_token

    def verify(self, token: str | None) -> None:
        if not self._expected_token:
            raise AuthorizationError(
                "Administrative actions are disabled: FRESHCART_ADMIN_TOKEN is not set"
            )
        if not token or not hmac.compare_digest(
            token.encode("utf-8"), self._expected_token.encode("utf-8")
        ):
            raise AuthorizationError("Invalid administrator token")
