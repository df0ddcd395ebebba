version = '1.0.0'

from scm_client.client import Client  # noqa: E402
from scm_client.drivers import new_client  # noqa: E402
from scm_client.models import Driver  # noqa: E402
from scm_client.services import Result  # noqa: E402

__all__ = ['Client', 'Driver', 'Result', 'new_client', 'version']
