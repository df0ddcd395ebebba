import datetime
import enum
import typing

import pydantic

from scm_client.models import base, user


class DeploymentState(enum.StrEnum):
    error = 'error'
    failure = 'failure'
    inactive = 'inactive'
    in_progress = 'in_progress'
    queued = 'queued'
    pending = 'pending'
    success = 'success'
    unknown = 'unknown'

    @classmethod
    def _missing_(cls, value: object) -> 'DeploymentState':
        return cls.unknown


class Deployment(base.BaseModel):
    """A recorded release of a repository ref to an environment."""

    id: str = ''
    namespace: str = ''
    name: str = ''
    full_name: str = ''
    link: str = ''
    sha: str = ''
    ref: str = ''
    task: str = ''
    description: str = ''
    original_environment: str = ''
    environment: str = ''
    repository_link: str = ''
    status_link: str = ''
    author: user.User | None = None
    created: datetime.datetime | None = None
    updated: datetime.datetime | None = None
    transient_environment: bool = False
    production_environment: bool = False
    payload: typing.Any = None


class DeploymentInput(pydantic.BaseModel):
    """Parameters for creating a deployment."""

    ref: str = ''
    sha: str = ''  # GitLab only, defaults to ref
    task: str = ''
    payload: typing.Any = None
    environment: str = ''
    description: str = ''
    # None leaves the provider default (all contexts) in place
    required_contexts: list[str] | None = None
    auto_merge: bool = False
    transient_environment: bool = False
    production_environment: bool = False


class DeploymentStatus(base.BaseModel):
    """A timestamped state update attached to a deployment."""

    id: str = ''
    state: DeploymentState = DeploymentState.unknown
    author: user.User | None = None
    description: str = ''
    environment: str = ''
    deployment_link: str = ''
    environment_link: str = ''
    log_link: str = ''
    repository_link: str = ''
    target_link: str = ''
    created: datetime.datetime | None = None
    updated: datetime.datetime | None = None


class DeploymentStatusInput(pydantic.BaseModel):
    """Parameters for creating a deployment status."""

    state: DeploymentState = DeploymentState.pending
    target_link: str = ''
    log_link: str = ''
    description: str = ''
    environment: str = ''
    environment_link: str = ''
    auto_inactive: bool = False
