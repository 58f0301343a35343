"""Query Filters: map optional listing parameters onto exact-match column filters.

Invariants:
    - Only parameters that are present and non-empty become constraints
    - Result is a conjunction: every returned pair must match exactly
    - Unknown parameter names are ignored
"""

USER_FILTER_FIELDS: dict[str, str] = {
    "status": "status",
    "role": "role",
    "bloodGroup": "blood_group",
    "district": "district",
    "upazila": "upazila",
}

# email targets the requester, location targets the recipient
DONATION_REQUEST_FILTER_FIELDS: dict[str, str] = {
    "email": "requester_email",
    "status": "status",
    "bloodGroup": "blood_group",
    "district": "recipient_district",
    "upazila": "recipient_upazila",
}


def build_exact_match_filter(
    params: dict[str, str | None], field_map: dict[str, str],
) -> dict[str, str]:
    """Translate wire parameter names into {column: value} for set values only."""
    return {
        field_map[name]: value
        for name, value in params.items()
        if name in field_map and value
    }
