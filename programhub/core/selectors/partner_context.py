# programhub/core/selectors/partner_context.py
"""
Which partner does the signed-in user act for?

The session only carries free-text fields (organization name, email), so the
partner is found by fuzzy organization matching first, then by the
partner-user directory, and finally falls back to the first partner so a
prototype dashboard always has something to show.
"""

from __future__ import annotations

import re
from typing import Optional

from programhub.core.domain.database import PrototypeDatabase
from programhub.core.domain.models import Partner, PartnerUser, UserSession
from programhub.core.domain.views import PartnerContext


# Common long names that partners and users abbreviate inconsistently.
ORGANIZATION_ABBREVIATIONS = {
    r"save\s+the\s+children": "stc",
}

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    trimmed = value.strip()
    return trimmed.lower() if trimmed else None


def normalize_organization_key(value: Optional[str]) -> Optional[str]:
    normalized = normalize(value)
    if not normalized:
        return None

    for pattern, replacement in ORGANIZATION_ABBREVIATIONS.items():
        normalized = re.sub(pattern, replacement, normalized)

    return _NON_ALNUM.sub(" ", normalized).strip() or None


def find_partner_by_organization(
    organization_name: Optional[str],
    database: PrototypeDatabase,
) -> Optional[Partner]:
    """Exact key match first, then either key containing the other."""
    organization_key = normalize_organization_key(organization_name)
    if not organization_key:
        return None

    for partner in database.partners:
        if normalize_organization_key(partner.organization_name) == organization_key:
            return partner

    for partner in database.partners:
        partner_key = normalize_organization_key(partner.organization_name)
        if partner_key and (partner_key in organization_key or organization_key in partner_key):
            return partner

    return None


def find_partner_user_by_email(email: Optional[str], database: PrototypeDatabase) -> Optional[PartnerUser]:
    normalized_email = normalize(email)
    if not normalized_email:
        return None
    return next(
        (user for user in database.partner_users if user.email.lower() == normalized_email),
        None,
    )


def resolve_partner_id_from_session(
    session: Optional[UserSession],
    database: Optional[PrototypeDatabase],
) -> Optional[str]:
    if session is None or database is None:
        return None

    partner = find_partner_by_organization(session.organization, database)
    if partner is not None:
        return partner.id

    partner_user = find_partner_user_by_email(session.email, database)
    if partner_user is not None:
        return partner_user.partner_id

    return database.partners[0].id if database.partners else None


def resolve_partner_context(
    session: Optional[UserSession],
    database: Optional[PrototypeDatabase],
) -> PartnerContext:
    partner_id = resolve_partner_id_from_session(session, database)

    if database is None or partner_id is None:
        return PartnerContext(partner_id=partner_id)

    partner = next((entry for entry in database.partners if entry.id == partner_id), None)
    partner_user = find_partner_user_by_email(session.email, database) if session else None

    return PartnerContext(partner_id=partner_id, partner=partner, partner_user=partner_user)
