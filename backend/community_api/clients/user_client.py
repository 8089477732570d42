"""
User service client.

The community backend never stores users itself. Whether a user id is valid,
and whether that user is an administrator, is answered by the user service:

    GET {base}/user/client/check/{user_id}       -> {"success": true, "data": true}
    GET {base}/user/client/checkAdmin/{user_id}  -> {"success": true, "data": false}

Any transport error, non-2xx answer or malformed body counts as "check failed"
and is logged, never raised.
"""
from typing import Iterator, Optional

import requests
import structlog

from community_api.core.config import USER_SERVICE_BASE_URL, USER_SERVICE_TIMEOUT
from community_api.core.exceptions import UnauthorizedError

logger = structlog.get_logger()


class UserClient:

    def __init__(
        self,
        base_url: str = USER_SERVICE_BASE_URL,
        timeout: float = USER_SERVICE_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def close(self) -> None:
        self.session.close()

    # ---- 검증 (실패 시 401) ----
    def validate_user(self, user_id: Optional[int]) -> None:
        if user_id is None:
            raise UnauthorizedError("User ID is required")
        if not self.check_user_exists(user_id):
            raise UnauthorizedError("Valid user required for this operation")

    def validate_admin_user(self, user_id: Optional[int]) -> None:
        if user_id is None:
            raise UnauthorizedError("User ID is required")
        if not self.check_user_is_admin(user_id):
            raise UnauthorizedError("Admin privileges required for this operation")

    # ---- 원격 체크 (실패 시 False) ----
    def check_user_exists(self, user_id: int) -> bool:
        return self._check(f"/user/client/check/{user_id}", user_id, "user")

    def check_user_is_admin(self, user_id: int) -> bool:
        return self._check(f"/user/client/checkAdmin/{user_id}", user_id, "admin")

    def _check(self, path: str, user_id: int, kind: str) -> bool:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("User service request failed", kind=kind, user_id=user_id, error=str(e))
            return False

        if not response.ok:
            logger.warning(
                "User service returned error status",
                kind=kind,
                user_id=user_id,
                status_code=response.status_code,
            )
            return False

        try:
            body = response.json()
        except ValueError:
            logger.warning("User service returned non-JSON body", kind=kind, user_id=user_id)
            return False

        if not isinstance(body, dict):
            return False
        return body.get("success") is True and body.get("data") is True


def get_user_client() -> Iterator[UserClient]:
    client = UserClient()
    try:
        yield client
    finally:
        client.close()
