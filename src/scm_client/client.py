import logging
import types

from scm_client import http, models, services
from scm_client.models import Driver

LOGGER = logging.getLogger(__name__)

__all__ = ['Client', 'Driver']


class Client:
    """Provider-agnostic entry point.

    Build one with :func:`scm_client.new_client`. The services hold no
    per-call state, so a single client may be shared between tasks.

    """

    def __init__(
        self,
        driver: models.Driver,
        api: http.BaseURLClient,
        deployments: services.DeploymentService,
        apps: services.AppService,
    ) -> None:
        self.driver = driver
        self.api = api
        self.deployments = deployments
        self.apps = apps

    @property
    def base_url(self) -> str:
        return self.api.base_url

    async def aclose(self) -> None:
        LOGGER.debug('Closing %s client for %s', self.driver, self.base_url)
        await self.api.aclose()

    async def __aenter__(self) -> 'Client':
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: types.TracebackType | None,
    ) -> None:
        await self.aclose()
