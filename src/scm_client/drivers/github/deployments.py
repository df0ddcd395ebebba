import logging
import typing

from scm_client import models, services
from scm_client.drivers import base

from . import client, models as wire

LOGGER = logging.getLogger(__name__)


class DeploymentService(services.DeploymentService):
    def __init__(self, api: client.GitHub) -> None:
        self._api = api

    async def find(
        self, repo: str, deployment_id: str
    ) -> services.Result[models.Deployment]:
        """Get a single deployment by id."""
        return await self._api.send(
            'GET',
            f'/repos/{repo}/deployments/{deployment_id}',
            lambda data: convert_deployment(
                wire.GitHubDeployment.model_validate(data), repo
            ),
            models.Deployment,
        )

    async def create(
        self, repo: str, deployment: models.DeploymentInput
    ) -> services.Result[models.Deployment]:
        """Create a deployment of ``deployment.ref``."""
        LOGGER.debug(
            'Creating deployment of %s to %s for %s',
            deployment.ref,
            deployment.environment or 'default environment',
            repo,
        )
        return await self._api.send(
            'POST',
            f'/repos/{repo}/deployments',
            lambda data: convert_deployment(
                wire.GitHubDeployment.model_validate(data), repo
            ),
            models.Deployment,
            body=deployment_body(deployment),
        )

    async def find_status(
        self, repo: str, deployment_id: str, status_id: str
    ) -> services.Result[models.DeploymentStatus]:
        """Get a single status of a deployment."""
        return await self._api.send(
            'GET',
            f'/repos/{repo}/deployments/{deployment_id}/statuses/{status_id}',
            lambda data: convert_status(
                wire.GitHubDeploymentStatus.model_validate(data)
            ),
            models.DeploymentStatus,
        )

    async def list_status(
        self,
        repo: str,
        deployment_id: str,
        options: models.ListOptions | None = None,
    ) -> services.Result[list[models.DeploymentStatus]]:
        """List the statuses of a deployment, newest first."""
        return await self._api.send(
            'GET',
            f'/repos/{repo}/deployments/{deployment_id}/statuses',
            lambda data: [
                convert_status(wire.GitHubDeploymentStatus.model_validate(i))
                for i in _array(data)
            ],
            list,
            params=base.list_params(options),
        )

    async def create_status(
        self,
        repo: str,
        deployment_id: str,
        status: models.DeploymentStatusInput,
    ) -> services.Result[models.DeploymentStatus]:
        """Add a status to a deployment."""
        LOGGER.debug(
            'Setting deployment %s of %s to %s',
            deployment_id,
            repo,
            status.state,
        )
        return await self._api.send(
            'POST',
            f'/repos/{repo}/deployments/{deployment_id}/statuses',
            lambda data: convert_status(
                wire.GitHubDeploymentStatus.model_validate(data)
            ),
            models.DeploymentStatus,
            body=status_body(status),
        )

    async def list(
        self, repo: str, options: models.ListOptions | None = None
    ) -> services.Result[list[models.Deployment]]:
        """List the deployments of a repository, newest first."""
        return await self._api.send(
            'GET',
            f'/repos/{repo}/deployments',
            lambda data: [
                convert_deployment(
                    wire.GitHubDeployment.model_validate(item), repo
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


def convert_user(user: wire.GitHubUser | None) -> models.User | None:
    if user is None:
        return None
    return models.User(
        login=user.login,
        name=user.name or '',
        email=user.email or '',
        avatar=user.avatar_url,
        link=user.html_url,
        is_admin=user.site_admin,
        created=user.created_at,
        updated=user.updated_at,
    )


def convert_deployment(
    deployment: wire.GitHubDeployment, repo: str
) -> models.Deployment:
    namespace, name = base.split_repo(repo)
    return models.Deployment(
        id=str(deployment.id),
        namespace=namespace,
        name=name,
        full_name=repo,
        link=deployment.url,
        sha=deployment.sha,
        ref=deployment.ref,
        task=deployment.task,
        description=deployment.description or '',
        original_environment=deployment.original_environment or '',
        environment=deployment.environment,
        repository_link=deployment.repository_url,
        status_link=deployment.statuses_url,
        author=convert_user(deployment.creator),
        created=deployment.created_at,
        updated=deployment.updated_at,
        transient_environment=deployment.transient_environment,
        production_environment=deployment.production_environment,
        payload=deployment.payload,
    )


def convert_status(
    status: wire.GitHubDeploymentStatus,
) -> models.DeploymentStatus:
    return models.DeploymentStatus(
        id=str(status.id),
        state=models.DeploymentState(status.state),
        author=convert_user(status.creator),
        description=status.description or '',
        environment=status.environment or '',
        deployment_link=status.deployment_url,
        environment_link=status.environment_url or '',
        log_link=status.log_url or '',
        repository_link=status.repository_url,
        target_link=status.target_url or '',
        created=status.created_at,
        updated=status.updated_at,
    )


def deployment_body(deployment: models.DeploymentInput) -> dict:
    body = {
        'ref': deployment.ref,
        'auto_merge': deployment.auto_merge,
        'transient_environment': deployment.transient_environment,
        'production_environment': deployment.production_environment,
    }
    for key in ('task', 'environment', 'description'):
        if value := getattr(deployment, key):
            body[key] = value
    if deployment.payload is not None:
        body['payload'] = deployment.payload
    if deployment.required_contexts is not None:
        body['required_contexts'] = deployment.required_contexts
    return body


def status_body(status: models.DeploymentStatusInput) -> dict:
    body = {
        'state': str(status.state),
        'auto_inactive': status.auto_inactive,
    }
    for key, field in (
        ('target_url', status.target_link),
        ('log_url', status.log_link),
        ('description', status.description),
        ('environment', status.environment),
        ('environment_url', status.environment_link),
    ):
        if field:
            body[key] = field
    return body
