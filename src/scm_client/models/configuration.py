import enum
import functools
import os

import pydantic


class Driver(enum.StrEnum):
    github = 'github'
    gitlab = 'gitlab'


def _secret_from_env(name: str) -> pydantic.SecretStr | None:
    value = os.environ.get(name)
    return pydantic.SecretStr(value) if value else None


class GitHubConfiguration(pydantic.BaseModel):
    api_key: pydantic.SecretStr | None = pydantic.Field(
        default_factory=functools.partial(_secret_from_env, 'GITHUB_TOKEN')
    )
    hostname: str = pydantic.Field(default='api.github.com')
    api_version: str = '2022-11-28'


class GitLabConfiguration(pydantic.BaseModel):
    api_key: pydantic.SecretStr | None = pydantic.Field(
        default_factory=functools.partial(_secret_from_env, 'GITLAB_TOKEN')
    )
    hostname: str = pydantic.Field(default='gitlab.com')


class Configuration(pydantic.BaseModel):
    driver: Driver = Driver.github
    github: GitHubConfiguration = pydantic.Field(
        default_factory=GitHubConfiguration
    )
    gitlab: GitLabConfiguration = pydantic.Field(
        default_factory=GitLabConfiguration
    )
    timeout: float | None = 30.0  # seconds, None disables
