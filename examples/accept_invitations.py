#!/usr/bin/env python3
"""
Accept every pending repository invitation for the authenticated user.

Run with: GITHUB_TOKEN=... python examples/accept_invitations.py
"""

import logging

from hubkit import ApiError, ConfigurationError, HubKitClient, configure_logging

configure_logging(level=logging.INFO)

try:
    client = HubKitClient.from_env()
except ConfigurationError as e:
    raise SystemExit(f"Configuration error: {e.message}")

with client:
    invitations = client.repository_invitations
    pending = invitations.get_all_for_current()
    print(f"{len(pending)} pending invitation(s)")

    for invitation in pending:
        name = invitation.repository.full_name
        try:
            if invitations.accept(invitation.id):
                print(f"   Accepted {name} ({invitation.permissions})")
            else:
                print(f"   {name}: invitation no longer exists")
        except ApiError as e:
            print(f"   {name}: {e}")
