# services/session_manager.py

"""
Owns the identity of whoever is using the dashboard.

One SessionManager holds at most one session: the authenticated user plus
their resolved data bundle. Every change is written through to the durable
storage under the `currentUser` / `userData` keys, and `restore_session()`
rehydrates from those keys at startup.

    Unauthenticated --login ok / switch_user--> Authenticated(user, bundle)
    Authenticated   --logout-->                 Unauthenticated

Authentication is demo-only: the email selects the user and the password is
handed to `verify_password`, which accepts anything unless replaced.
"""

import asyncio
import json
from typing import Callable, Optional

from pydantic import ValidationError

from core.config import settings
from core.logging_config import logger
from core.storage import SessionStorage, CURRENT_USER_KEY, USER_DATA_KEY
from models.user import User
from models.bundle import DataBundle, data_bundle_adapter
from models.session import SessionState
from services.data_resolver import get_data_for_user, get_user_by_email, get_user_by_id


def accept_any_password(user: User, password: str) -> bool:
    return True


class SessionManager:
    def __init__(
        self,
        storage: SessionStorage,
        login_delay: Optional[float] = None,
        verify_password: Callable[[User, str], bool] = accept_any_password,
        resolve_data: Callable[[str, str], Optional[DataBundle]] = get_data_for_user,
    ):
        self.storage = storage
        self.login_delay = settings.LOGIN_DELAY_SECONDS if login_delay is None else login_delay
        self.verify_password = verify_password
        self.resolve_data = resolve_data

        self._user: Optional[User] = None
        self._user_data: Optional[DataBundle] = None
        # True until restore_session() has run, like a fresh page load
        self._is_loading = True
        self._pending_logins = 0

    # -----------------------------------------------------
    # Read-only view
    # -----------------------------------------------------
    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def user_data(self) -> Optional[DataBundle]:
        return self._user_data

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def state(self) -> SessionState:
        return SessionState(
            user=self._user,
            user_data=self._user_data,
            is_loading=self._is_loading,
        )

    # -----------------------------------------------------
    # Mutations
    # -----------------------------------------------------
    async def login(self, email: str, password: str) -> bool:
        """
        Authenticate by email after a simulated network delay.

        Returns:
            True and replaces the session when the email belongs to a demo
            user; False and leaves the current session untouched otherwise.
        """
        self._is_loading = True
        self._pending_logins += 1
        try:
            await asyncio.sleep(self.login_delay)

            user = get_user_by_email(email)
            if user is None or not self.verify_password(user, password):
                logger.warning(f"Login failed for {email!r}")
                return False

            self._start_session(user)
            logger.info(f"User {user.id} ({user.role}) logged in")
            return True
        finally:
            # Loading ends with the last overlapping login, not the first
            self._pending_logins -= 1
            if self._pending_logins == 0:
                self._is_loading = False

    def logout(self):
        """Clear the session from memory and storage. Safe to call repeatedly."""
        if self._user is not None:
            logger.info(f"User {self._user.id} logged out")
        self._user = None
        self._user_data = None
        self._clear_storage()

    def switch_user(self, user_id: str) -> bool:
        """
        Demo shortcut: become another demo user without a password.

        Returns:
            True if the id matched a user and the session was replaced,
            False (session untouched) otherwise.
        """
        user = get_user_by_id(user_id)
        if user is None:
            logger.warning(f"Switch requested for unknown user id {user_id!r}")
            return False

        self._start_session(user)
        logger.info(f"Switched session to user {user.id} ({user.role})")
        return True

    def restore_session(self):
        """
        Rehydrate a persisted session, if any.

        Corrupted entries are removed and the manager stays logged out.
        """
        try:
            saved_user = self.storage.get_item(CURRENT_USER_KEY)
            saved_data = self.storage.get_item(USER_DATA_KEY)

            if saved_user and saved_data:
                user = User.model_validate(json.loads(saved_user))
                user_data = data_bundle_adapter.validate_python(json.loads(saved_data))

                if user_data.role != user.role:
                    raise ValueError(
                        f"Stored bundle role '{user_data.role}' does not match user role '{user.role}'"
                    )

                self._user = user
                self._user_data = user_data
                logger.info(f"Restored session for user {user.id}")
        except (json.JSONDecodeError, ValidationError, ValueError) as e:
            logger.error(f"Error loading saved session: {e}")
            self._user = None
            self._user_data = None
            self._clear_storage()
        finally:
            self._is_loading = False

    # -----------------------------------------------------
    # Internals
    # -----------------------------------------------------
    def _start_session(self, user: User):
        user_data = self.resolve_data(user.id, user.role)

        self._user = user
        self._user_data = user_data

        self.storage.set_item(CURRENT_USER_KEY, user.model_dump_json())
        self.storage.set_item(USER_DATA_KEY, json.dumps(_dump_bundle(user_data)))

    def _clear_storage(self):
        self.storage.remove_item(CURRENT_USER_KEY)
        self.storage.remove_item(USER_DATA_KEY)


def _dump_bundle(bundle: Optional[DataBundle]):
    if bundle is None:
        return None
    return bundle.model_dump(mode="json")
