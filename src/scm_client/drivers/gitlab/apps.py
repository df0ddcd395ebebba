from scm_client import models, services


class AppService(services.AppService):
    """GitLab has no app installations."""

    async def get_repository_installation(
        self, repo: str
    ) -> services.Result[models.Installation]:
        return services.not_supported(models.Installation)

    async def get_organisation_installation(
        self, org: str
    ) -> services.Result[models.Installation]:
        return services.not_supported(models.Installation)

    async def get_user_installation(
        self, user: str
    ) -> services.Result[models.Installation]:
        return services.not_supported(models.Installation)
