import datetime

from scm_client.models import base, user


class Installation(base.BaseModel):
    """Binding of an app's credentials and permissions to an account."""

    id: int = 0
    app_id: int = 0
    target_id: int = 0
    target_type: str = ''
    repository_selection: str = ''
    account: user.Account = user.Account()
    permissions: dict[str, str] = {}
    events: list[str] = []
    access_tokens_link: str = ''
    repositories_link: str = ''
    link: str = ''
    created: datetime.datetime | None = None
    updated: datetime.datetime | None = None
