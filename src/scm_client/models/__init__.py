from .app import Installation
from .base import BaseModel
from .configuration import (
    Configuration,
    Driver,
    GitHubConfiguration,
    GitLabConfiguration,
)
from .deployment import (
    Deployment,
    DeploymentInput,
    DeploymentState,
    DeploymentStatus,
    DeploymentStatusInput,
)
from .response import ListOptions, Page, Rate, ResponseMeta
from .user import Account, User

__all__ = [
    'Account',
    'BaseModel',
    'Configuration',
    'Deployment',
    'DeploymentInput',
    'DeploymentState',
    'DeploymentStatus',
    'DeploymentStatusInput',
    'Driver',
    'GitHubConfiguration',
    'GitLabConfiguration',
    'Installation',
    'ListOptions',
    'Page',
    'Rate',
    'ResponseMeta',
    'User',
]
