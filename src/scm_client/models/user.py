import datetime

from scm_client.models import base


class User(base.BaseModel):
    """A user account on the hosting provider."""

    login: str = ''
    name: str = ''
    email: str = ''
    avatar: str = ''
    link: str = ''
    is_admin: bool = False
    created: datetime.datetime | None = None
    updated: datetime.datetime | None = None


class Account(base.BaseModel):
    """The user or organisation an app is installed on."""

    id: int = 0
    login: str = ''
    link: str = ''
