import logging
import typing

from scm_client import models, services
from scm_client.drivers import base

from . import client, models as wire

LOGGER = logging.getLogger(__name__)


class DeploymentService(services.DeploymentService):
    """GitLab deployments.

    GitLab tracks a single status on the deployment itself rather than a
    list of status records, so the status operations are not supported.

    """

    def __init__(self, api: client.GitLab) -> None:
        self._api = api

    async def find(
        self, repo: str, deployment_id: str
    ) -> services.Result[models.Deployment]:
        """Get a single deployment of a project by id."""
        return await self._api.send(
            'GET',
            f'{client.project_path(repo)}/deployments/{deployment_id}',
            lambda data: convert_deployment(
                wire.GitLabDeployment.model_validate(data), repo
            ),
            models.Deployment,
        )

    async def create(
        self, repo: str, deployment: models.DeploymentInput
    ) -> services.Result[models.Deployment]:
        """Create a deployment of ``deployment.sha`` on ``deployment.ref``."""
        LOGGER.debug(
            'Creating deployment of %s to %s for %s',
            deployment.ref,
            deployment.environment,
            repo,
        )
        return await self._api.send(
            'POST',
            f'{client.project_path(repo)}/deployments',
            lambda data: convert_deployment(
                wire.GitLabDeployment.model_validate(data), repo
            ),
            models.Deployment,
            body=deployment_body(deployment),
        )

    async def find_status(
        self, repo: str, deployment_id: str, status_id: str
    ) -> services.Result[models.DeploymentStatus]:
        return services.not_supported(models.DeploymentStatus)

    async def list_status(
        self,
        repo: str,
        deployment_id: str,
        options: models.ListOptions | None = None,
    ) -> services.Result[list[models.DeploymentStatus]]:
        return services.not_supported(list)

    async def create_status(
        self,
        repo: str,
        deployment_id: str,
        status: models.DeploymentStatusInput,
    ) -> services.Result[models.DeploymentStatus]:
        return services.not_supported(models.DeploymentStatus)

    async def list(
        self, repo: str, options: models.ListOptions | None = None
    ) -> services.Result[list[models.Deployment]]:
        """List the deployments of a project."""
        return await self._api.send(
            'GET',
            f'{client.project_path(repo)}/deployments',
            lambda data: [
                convert_deployment(
                    wire.GitLabDeployment.model_validate(item), repo
                )
                for item in _array(data)
            ],
            list,
            params=base.list_params(options),
        )


def _array(data: typing.Any) -> list[typing.Any]:
    if not isinstance(data, list):
        raise TypeError(f'Expected a JSON array, got {type(data).__name__}')
    return data


def convert_user(user: wire.GitLabUser | None) -> models.User | None:
    if user is None:
        return None
    return models.User(
        login=user.username,
        name=user.name,
        avatar=user.avatar_url or '',
        link=user.web_url,
    )


def convert_deployment(
    deployment: wire.GitLabDeployment, repo: str
) -> models.Deployment:
    namespace, name = base.split_repo(repo)
    environment = deployment.environment or wire.GitLabEnvironment()
    return models.Deployment(
        id=str(deployment.id),
        namespace=namespace,
        name=name,
        full_name=repo,
        sha=deployment.sha,
        ref=deployment.ref,
        environment=environment.name,
        author=convert_user(deployment.user),
        created=deployment.created_at,
        updated=deployment.updated_at,
        production_environment=environment.tier == 'production',
    )


def deployment_body(deployment: models.DeploymentInput) -> dict:
    return {
        'environment': deployment.environment,
        'ref': deployment.ref,
        'sha': deployment.sha or deployment.ref,
        'tag': False,
        'status': 'running',
    }
