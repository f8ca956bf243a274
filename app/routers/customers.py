import logging

from fastapi import APIRouter, Depends
from supabase import Client

from ..accounts import CUSTOMER, fetch_profile, login_account, register_account
from ..errors import GatewayError, InternalError
from ..schemas.accounts import CustomerRegisterPayload, LoginPayload
from ..supabase_client import get_supabase_admin_client, get_supabase_client

router = APIRouter(prefix="/customers", tags=["customers"])
logger = logging.getLogger(__name__)


@router.post("/register")
def register_customer(
    payload: CustomerRegisterPayload | None = None,
    supabase: Client = Depends(get_supabase_client),
    admin_client: Client | None = Depends(get_supabase_admin_client),
):
    """Create the auth identity, then the user_register row."""
    try:
        return register_account(CUSTOMER, payload or CustomerRegisterPayload(), supabase, admin_client)
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Customer registration failed")
        raise InternalError({"error": "Internal server error"}) from exc


@router.post("/login")
def login_customer(
    payload: LoginPayload | None = None,
    supabase: Client = Depends(get_supabase_client),
):
    try:
        return login_account(CUSTOMER, payload or LoginPayload(), supabase)
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Customer login failed")
        raise InternalError({"success": False, "error": "Internal server error"}) from exc


@router.get("/profile/{user_id}")
def get_customer_profile(user_id: str, supabase: Client = Depends(get_supabase_client)):
    try:
        return fetch_profile(CUSTOMER, user_id, supabase)
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Customer profile lookup failed")
        raise InternalError({"error": "Server error"}) from exc
