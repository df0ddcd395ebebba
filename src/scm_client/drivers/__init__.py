import httpx

from scm_client import client, models

from . import github, gitlab


def new_client(
    configuration: models.Configuration | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> client.Client:
    """Build a client for the configured driver.

    Args:
        configuration: Driver selection and provider settings
        transport: Replaces the network transport, e.g. with
            :class:`httpx.MockTransport` in tests

    """
    configuration = configuration or models.Configuration()
    if configuration.driver == models.Driver.gitlab:
        return gitlab.new(
            configuration.gitlab, transport, configuration.timeout
        )
    return github.new(configuration.github, transport, configuration.timeout)
