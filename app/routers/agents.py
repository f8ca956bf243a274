import logging

from fastapi import APIRouter, Depends
from supabase import Client

from ..accounts import AGENT, fetch_profile, login_account, register_account
from ..errors import GatewayError, InternalError
from ..schemas.accounts import AgentRegisterPayload, LoginPayload
from ..supabase_client import get_supabase_admin_client, get_supabase_client

router = APIRouter(prefix="/agent", tags=["agents"])
logger = logging.getLogger(__name__)


@router.post("/register")
def register_agent(
    payload: AgentRegisterPayload | None = None,
    supabase: Client = Depends(get_supabase_client),
    admin_client: Client | None = Depends(get_supabase_admin_client),
):
    """Create the auth identity, then the agent_register row. token_code is stored unchecked."""
    try:
        return register_account(AGENT, payload or AgentRegisterPayload(), supabase, admin_client)
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Agent registration failed")
        raise InternalError({"error": "Internal server error"}) from exc


@router.post("/login")
def login_agent(
    payload: LoginPayload | None = None,
    supabase: Client = Depends(get_supabase_client),
):
    try:
        return login_account(AGENT, payload or LoginPayload(), supabase)
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Agent login failed")
        # No "success" key here, unlike the customer route
        raise InternalError({"error": "Internal server error"}) from exc


@router.get("/profile/{user_id}")
def get_agent_profile(user_id: str, supabase: Client = Depends(get_supabase_client)):
    try:
        return fetch_profile(AGENT, user_id, supabase)
    except GatewayError:
        raise
    except Exception as exc:
        logger.exception("Agent profile lookup failed")
        raise InternalError({"error": "Server error"}) from exc
