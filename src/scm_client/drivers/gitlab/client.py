import logging
import urllib.parse

import httpx

from scm_client import decoder, models
from scm_client.drivers import base

LOGGER = logging.getLogger(__name__)


class GitLab(base.DriverClient):
    header_scheme = decoder.GITLAB

    def __init__(
        self,
        config: models.GitLabConfiguration,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = 30.0,
    ) -> None:
        super().__init__(transport, timeout)
        self._base_url = f'https://{config.hostname}'
        if config.api_key is not None:
            self.add_header('PRIVATE-TOKEN', config.api_key.get_secret_value())
        else:
            LOGGER.debug('No GitLab token configured, sending anonymously')


def project_path(repo: str) -> str:
    """API path prefix for a project addressed by its full path."""
    return f'/api/v4/projects/{urllib.parse.quote(repo, safe="")}'
