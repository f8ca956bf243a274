"""
Register, login and profile flows shared by the customer and agent routers.

Identity operations go to Supabase Auth, profile rows to a per-role table.
Registration is two sequential calls without a transaction: when the profile
insert fails the identity is kept unless an admin client is passed in to
delete it.
"""

import logging
from dataclasses import dataclass

from postgrest.exceptions import APIError
from supabase import AuthError, Client

from .config import get_settings
from .errors import AuthProviderError, NotFoundError, StoreError
from .schemas.accounts import CustomerRegisterPayload, LoginPayload

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "All fields are required."
LOGIN_REQUIRED_MESSAGE = "Email and password are required"
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@dataclass(frozen=True)
class AccountRole:
    label: str
    table_setting: str
    profile_fields: tuple[str, ...]

    @property
    def table(self) -> str:
        return getattr(get_settings(), self.table_setting)

    @property
    def select_clause(self) -> str:
        return ", ".join(self.profile_fields)


CUSTOMER = AccountRole(
    label="User",
    table_setting="CUSTOMER_TABLE",
    profile_fields=("firstname", "lastname", "email"),
)
AGENT = AccountRole(
    label="Agent",
    table_setting="AGENT_TABLE",
    profile_fields=("firstname", "lastname", "email", "phone", "image"),
)


def _rollback_identity(admin_client: Client, user_id: str) -> None:
    try:
        admin_client.auth.admin.delete_user(user_id)
        logger.info("Deleted orphaned identity %s", user_id)
    except Exception:
        logger.exception("Failed to delete orphaned identity %s", user_id)


def register_account(
    role: AccountRole,
    payload: CustomerRegisterPayload,
    supabase: Client,
    admin_client: Client | None = None,
) -> dict:
    payload.ensure_complete(REQUIRED_FIELDS_MESSAGE)

    try:
        res = supabase.auth.sign_up({"email": payload.email, "password": payload.password})
    except AuthError as exc:
        raise AuthProviderError({"error": exc.message}) from exc
    if not res.user:
        raise AuthProviderError({"error": "Unable to sign up"})

    user = res.user
    try:
        supabase.table(role.table).insert(payload.profile_row(user.id)).execute()
    except APIError as exc:
        if admin_client is not None:
            _rollback_identity(admin_client, user.id)
        else:
            logger.warning("Profile insert into %s failed, identity %s left without a profile", role.table, user.id)
        raise StoreError({"error": exc.message}) from exc

    logger.info("Registered %s %s", role.label.lower(), user.id)
    return {"success": True, "user": user.model_dump()}


def login_account(role: AccountRole, payload: LoginPayload, supabase: Client) -> dict:
    payload.ensure_complete(LOGIN_REQUIRED_MESSAGE)

    invalid = AuthProviderError({"success": False, "error": INVALID_CREDENTIALS_MESSAGE}, status_code=401)
    try:
        res = supabase.auth.sign_in_with_password({"email": payload.email, "password": payload.password})
    except AuthError as exc:
        # Provider text is not returned so callers cannot tell which credential was wrong
        logger.info("%s login rejected: %s", role.label, exc.message)
        raise invalid from exc
    if not res.session or not res.user:
        raise invalid

    return {
        "success": True,
        "user": res.user.model_dump(),
        "session": res.session.model_dump(),
    }


def fetch_profile(role: AccountRole, user_id: str, supabase: Client) -> dict:
    not_found = NotFoundError({"error": f"{role.label} not found"})
    try:
        response = (
            supabase.table(role.table)
            .select(role.select_clause)
            .eq("user_id", user_id)
            .single()
            .execute()
        )
    except APIError as exc:
        raise not_found from exc
    if not response.data:
        raise not_found

    return {"profile": response.data}
