import httpx

from scm_client.client import Client
from scm_client.models import Driver, GitLabConfiguration

from .apps import AppService
from .client import GitLab
from .deployments import DeploymentService

__all__ = ['AppService', 'DeploymentService', 'GitLab', 'new']


def new(
    config: GitLabConfiguration | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = 30.0,
) -> Client:
    """Build a :class:`~scm_client.client.Client` backed by GitLab."""
    api = GitLab(config or GitLabConfiguration(), transport, timeout)
    return Client(
        Driver.gitlab,
        api,
        deployments=DeploymentService(api),
        apps=AppService(),
    )
