import logging

import httpx

from scm_client import decoder, models
from scm_client.drivers import base

LOGGER = logging.getLogger(__name__)


class GitHub(base.DriverClient):
    header_scheme = decoder.GITHUB

    def __init__(
        self,
        config: models.GitHubConfiguration,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        super().__init__(transport, timeout)
        self._base_url = f'https://{config.hostname}'
        if config.api_key is not None:
            self.add_header(
                'Authorization',
                f'Bearer {config.api_key.get_secret_value()}',
            )
        else:
            LOGGER.debug('No GitHub token configured, sending anonymously')
        self.add_header('X-GitHub-Api-Version', config.api_version)
        self.add_header('Accept', 'application/vnd.github+json')
