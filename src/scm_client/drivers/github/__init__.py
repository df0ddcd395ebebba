import httpx

from scm_client.client import Client
from scm_client.models import Driver, GitHubConfiguration

from .apps import AppService
from .client import GitHub
from .deployments import DeploymentService

__all__ = ['AppService', 'DeploymentService', 'GitHub', 'new']


def new(
    config: GitHubConfiguration | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
    timeout: float | None = 30.0,
) -> Client:
    """Build a :class:`~scm_client.client.Client` backed by GitHub."""
    api = GitHub(config or GitHubConfiguration(), transport, timeout)
    return Client(
        Driver.github,
        api,
        deployments=DeploymentService(api),
        apps=AppService(api),
    )
