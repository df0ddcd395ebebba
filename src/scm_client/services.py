import abc
import typing

from scm_client import errors, models

T = typing.TypeVar('T')


class Result(typing.NamedTuple, typing.Generic[T]):
    """Outcome of a service call.

    Unpacks as ``value, response, error``. ``value`` is a zero-value domain
    object whenever ``error`` is set, so check ``error`` first.

    """

    value: T
    response: models.ResponseMeta
    error: errors.SCMError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the error if the call failed."""
        if self.error is not None:
            raise self.error
        return self.value


class DeploymentService(abc.ABC):
    """Deployments and their statuses for a repository."""

    @abc.abstractmethod
    async def find(
        self, repo: str, deployment_id: str
    ) -> Result[models.Deployment]: ...

    @abc.abstractmethod
    async def create(
        self, repo: str, deployment: models.DeploymentInput
    ) -> Result[models.Deployment]: ...

    @abc.abstractmethod
    async def find_status(
        self, repo: str, deployment_id: str, status_id: str
    ) -> Result[models.DeploymentStatus]: ...

    @abc.abstractmethod
    async def list_status(
        self,
        repo: str,
        deployment_id: str,
        options: models.ListOptions | None = None,
    ) -> Result[list[models.DeploymentStatus]]: ...

    @abc.abstractmethod
    async def create_status(
        self,
        repo: str,
        deployment_id: str,
        status: models.DeploymentStatusInput,
    ) -> Result[models.DeploymentStatus]: ...

    # Declared last, it shadows the builtin in the class body
    @abc.abstractmethod
    async def list(
        self, repo: str, options: models.ListOptions | None = None
    ) -> Result[list[models.Deployment]]: ...


class AppService(abc.ABC):
    """App installation lookups."""

    @abc.abstractmethod
    async def get_repository_installation(
        self, repo: str
    ) -> Result[models.Installation]: ...

    @abc.abstractmethod
    async def get_organisation_installation(
        self, org: str
    ) -> Result[models.Installation]: ...

    @abc.abstractmethod
    async def get_user_installation(
        self, user: str
    ) -> Result[models.Installation]: ...


def not_supported(default: typing.Callable[[], T]) -> Result[T]:
    """Result for an operation the provider has no counterpart for."""
    return Result(default(), models.ResponseMeta(), errors.NotSupportedError())
