"""Demo-account provisioning against Supabase Auth and the profiles tables."""

from __future__ import annotations

import asyncio

import structlog
from supabase import create_client

from fabric_dashboard.config import settings
from fabric_dashboard.models.provisioning import AccountResult, DemoUser

logger = structlog.get_logger()

DEMO_USERS: list[DemoUser] = [
    DemoUser(username="buyer", full_name="Satın Alma Uzmanı", email="buyer@tahagiyim.com", user_type="buyer"),
    DemoUser(username="fabric", full_name="Kumaş Sorumlusu", email="fabric@tahagiyim.com", user_type="fabric"),
    DemoUser(username="planlama", full_name="Planlama Uzmanı", email="planlama@tahagiyim.com", user_type="planlama"),
    DemoUser(username="fason", full_name="Fason Takip", email="fason@tahagiyim.com", user_type="fason"),
    DemoUser(username="kesim", full_name="Kesim Takip Uzmanı", email="kesim@tahagiyim.com", user_type="kesim_takip"),
    DemoUser(
        username="tedarik_muduru",
        full_name="Tedarik Müdürü",
        email="tedarik.muduru@tahagiyim.com",
        user_type="tedarik_muduru",
    ),
    DemoUser(
        username="isletme_muduru",
        full_name="İşletme Müdürü",
        email="isletme.muduru@tahagiyim.com",
        user_type="isletme_muduru",
    ),
    DemoUser(
        username="tedarik_sorumlusu",
        full_name="Tedarik Sorumlusu",
        email="tedarik.sorumlusu@tahagiyim.com",
        user_type="tedarik_sorumlusu",
    ),
]


def _get_supabase_client():
    """Create a Supabase client using service_role key."""
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def _provision_user_sync(client, user: DemoUser) -> AccountResult:
    existing = (
        client.table(settings.profiles_table)
        .select("id")
        .eq("username", user.username)
        .maybe_single()
        .execute()
    )
    if existing is not None and existing.data:
        return AccountResult(username=user.username, success=True, error="Already exists")

    auth_response = client.auth.admin.create_user(
        {
            "email": user.email,
            "password": settings.demo_password,
            "email_confirm": True,
        }
    )
    auth_user = auth_response.user
    if auth_user is None:
        return AccountResult(username=user.username, success=False, error="No user returned")

    client.table(settings.profiles_table).insert({
        "user_id": auth_user.id,
        "username": user.username,
        "full_name": user.full_name,
        "email": user.email,
        "status": "approved",
        "user_type": user.user_type,
    }).execute()

    client.table(settings.user_roles_table).insert({
        "user_id": auth_user.id,
        "role": "user",
    }).execute()

    return AccountResult(username=user.username, success=True)


def _create_demo_users_sync(client, users: list[DemoUser]) -> list[AccountResult]:
    results: list[AccountResult] = []
    for user in users:
        try:
            results.append(_provision_user_sync(client, user))
        except Exception as exc:
            logger.warning("demo_users.create.user_failed", username=user.username, error=str(exc))
            results.append(AccountResult(username=user.username, success=False, error=str(exc)))
    return results


async def create_demo_users(client=None, users: list[DemoUser] | None = None) -> list[AccountResult]:
    """Create every demo user that does not have a profile yet.

    A failure for one user is recorded in its result and does not stop the
    remaining users from being provisioned.
    """
    client = client or _get_supabase_client()
    results = await asyncio.to_thread(_create_demo_users_sync, client, users or DEMO_USERS)
    logger.info(
        "demo_users.created",
        results=[result.model_dump() for result in results],
    )
    return results


def _reset_passwords_sync(client) -> list[AccountResult]:
    response = (
        client.table(settings.profiles_table)
        .select("user_id, username")
        .eq("status", "approved")
        .execute()
    )

    results: list[AccountResult] = []
    for profile in response.data or []:
        username = profile.get("username", "")
        try:
            client.auth.admin.update_user_by_id(
                profile["user_id"], {"password": settings.demo_password}
            )
            results.append(AccountResult(username=username, success=True))
        except Exception as exc:
            results.append(AccountResult(username=username, success=False, error=str(exc)))
    return results


async def reset_demo_passwords(client=None) -> list[AccountResult]:
    """Set the demo password on every approved profile.

    Raises when the profile listing itself fails; per-user update failures
    are reported in the results.
    """
    client = client or _get_supabase_client()
    results = await asyncio.to_thread(_reset_passwords_sync, client)
    logger.info(
        "demo_users.passwords_reset",
        results=[result.model_dump() for result in results],
    )
    return results
