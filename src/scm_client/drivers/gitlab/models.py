import datetime

import pydantic


class GitLabModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(extra='ignore')


class GitLabUser(GitLabModel):
    id: int = 0
    username: str = ''
    name: str = ''
    avatar_url: str | None = None
    web_url: str = ''


class GitLabEnvironment(GitLabModel):
    id: int = 0
    name: str = ''
    external_url: str | None = None
    tier: str | None = None


class GitLabDeployment(GitLabModel):
    id: int = 0
    iid: int = 0
    ref: str = ''
    sha: str = ''
    status: str = ''
    user: GitLabUser | None = None
    environment: GitLabEnvironment | None = None
    created_at: datetime.datetime | None = None
    updated_at: datetime.datetime | None = None
