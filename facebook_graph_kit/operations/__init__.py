"""
Facebook Graph Operations Package

One module per Graph API area. Every operation is a single request made
through the client passed as the first argument.
"""

from .audiences import (
    audience,
    custom_audiences,
    create_audience,
    add_users,
    replace_users,
    sessions,
)
from .conversions import (
    dataset,
    datasets,
    upload_events,
)
from .me import (
    ad_accounts,
    me,
    user,
)

__all__ = [
    # Audiences
    "audience",
    "custom_audiences",
    "create_audience",
    "add_users",
    "replace_users",
    "sessions",
    # Conversions
    "dataset",
    "datasets",
    "upload_events",
    # Me
    "ad_accounts",
    "me",
    "user",
]
