from scm_client import models, services

from . import client, models as wire


class AppService(services.AppService):
    def __init__(self, api: client.GitHub) -> None:
        self._api = api

    async def get_repository_installation(
        self, repo: str
    ) -> services.Result[models.Installation]:
        """Get the app installation covering a repository."""
        return await self._installation(f'/repos/{repo}/installation')

    async def get_organisation_installation(
        self, org: str
    ) -> services.Result[models.Installation]:
        """Get the app installation for an organisation."""
        return await self._installation(f'/orgs/{org}/installation')

    async def get_user_installation(
        self, user: str
    ) -> services.Result[models.Installation]:
        """Get the app installation for a user account."""
        return await self._installation(f'/users/{user}/installation')

    async def _installation(
        self, path: str
    ) -> services.Result[models.Installation]:
        return await self._api.send(
            'GET',
            path,
            lambda data: convert_installation(
                wire.GitHubInstallation.model_validate(data)
            ),
            models.Installation,
        )


def convert_installation(
    installation: wire.GitHubInstallation,
) -> models.Installation:
    account = installation.account or wire.GitHubAccount()
    return models.Installation(
        id=installation.id,
        app_id=installation.app_id,
        target_id=installation.target_id,
        target_type=installation.target_type,
        repository_selection=installation.repository_selection,
        account=models.Account(
            id=account.id, login=account.login, link=account.html_url
        ),
        permissions=installation.permissions,
        events=installation.events,
        access_tokens_link=installation.access_tokens_url,
        repositories_link=installation.repositories_url,
        link=installation.html_url,
        created=installation.created_at,
        updated=installation.updated_at,
    )
