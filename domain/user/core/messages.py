"""Client-facing messages for user operations."""

USER_NOT_FOUND = "User with ID {user_id} not found."


def user_not_found_message(user_id: int) -> str:
    return USER_NOT_FOUND.format(user_id=user_id)
