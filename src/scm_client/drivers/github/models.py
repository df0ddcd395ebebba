"""GitHub REST API wire shapes.

Only the fields mapped onto the domain model are declared; the rest of the
payload is ignored.

"""
import datetime
import typing

import pydantic


class GitHubModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra='ignore')


class GitHubUser(GitHubModel):
    login: str = ''
    id: int = 0
    name: str | None = None
    email: str | None = None
    avatar_url: str = ''
    html_url: str = ''
    site_admin: bool = False
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None


class GitHubDeployment(GitHubModel):
    id: int = 0
    url: str = ''
    sha: str = ''
    ref: str = ''
    task: str = ''
    payload: typing.Any = None
    original_environment: str | None = None
    environment: str = ''
    description: str | None = None
    creator: GitHubUser | None = None
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None
    statuses_url: str = ''
    repository_url: str = ''
    transient_environment: bool = False
    production_environment: bool = False


class GitHubDeploymentStatus(GitHubModel):
    id: int = 0
    url: str = ''
    state: str = ''
    creator: GitHubUser | None = None
    description: str | None = None
    environment: str | None = None
    target_url: str | None = None
    log_url: str | None = None
    environment_url: str | None = None
    deployment_url: str = ''
    repository_url: str = ''
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None


class GitHubAccount(GitHubModel):
    id: int = 0
    login: str = ''
    html_url: str = ''


class GitHubInstallation(GitHubModel):
    id: int = 0
    app_id: int = 0
    target_id: int = 0
    target_type: str = ''
    repository_selection: str = ''
    account: GitHubAccount | None = None
    permissions: dict[str, str] = {}
    events: list[str] = []
    access_tokens_url: str = ''
    repositories_url: str = ''
    html_url: str = ''
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None
