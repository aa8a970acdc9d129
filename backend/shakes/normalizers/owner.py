def normalize_owner(user, include_email=False):
    """Minimal public profile of a submission's owner."""
    if user is None:
        return None

    data = {
        "id": user.id,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "name": user.full_name or "Community Member",
        "avatar_url": user.avatar_url,
    }

    if include_email:
        data["email"] = user.email

    return data
