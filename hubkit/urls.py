"""Canonical API paths for invitation resources."""


def user_invitations(invitation_id: int | None = None) -> str:
    """
    Path for the authenticated user's repository invitations.

    Args:
        invitation_id: The invitation id, or None for the collection

    Returns:
        Path such as "/user/repository_invitations/42"
    """
    if invitation_id is None:
        return "/user/repository_invitations"
    return f"/user/repository_invitations/{invitation_id}"


def repository_invitations(
    repository_id: int, invitation_id: int | None = None
) -> str:
    """
    Path for the invitations on a repository.

    Args:
        repository_id: The repository id
        invitation_id: The invitation id, or None for the collection

    Returns:
        Path such as "/repositories/7/invitations/42"
    """
    if invitation_id is None:
        return f"/repositories/{repository_id}/invitations"
    return f"/repositories/{repository_id}/invitations/{invitation_id}"


__all__ = [
    "user_invitations",
    "repository_invitations",
]
