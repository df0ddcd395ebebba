import argparse
import asyncio
import logging
import sys
import typing

import colorlog

from scm_client import client, drivers, models, services, utils, version

LOGGER = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure colored logging for CLI applications."""
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            '%(log_color)s%(asctime)s - %(name)s - %(levelname)s - '
            '%(message)s',
            log_colors={
                'DEBUG': 'cyan',
                'INFO': 'green',
                'WARNING': 'yellow',
                'ERROR': 'red',
                'CRITICAL': 'bold_red',
            },
        )
    )

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO, handlers=[handler]
    )

    # Reduce verbosity of HTTP libraries
    for logger_name in ('httpcore', 'httpx'):
        logging.getLogger(logger_name).setLevel(logging.WARNING)


def load_configuration(
    config_file: typing.TextIO | None, driver: str | None = None
) -> models.Configuration:
    """Load configuration from config file

    Args:
        config_file: File-like object to read TOML from, or None for defaults
        driver: Overrides the driver named in the file

    Raises:
        tomllib.TOMLDecodeError: If TOML parsing fails
        pydantic.ValidationError: If configuration validation fails

    """
    data = utils.load_toml(config_file) if config_file else {}
    if driver:
        data['driver'] = driver
    return models.Configuration.model_validate(data)


def _list_options(args: argparse.Namespace) -> models.ListOptions:
    return models.ListOptions(page=args.page, size=args.per_page)


def _add_list_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--page', type=int, default=1)
    parser.add_argument('--per-page', type=int, default=30)


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Source control provider API client',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        '-c',
        '--config',
        type=argparse.FileType('r'),
        metavar='CONFIG',
        help='Configuration file',
    )
    parser.add_argument(
        '--driver',
        choices=[driver.value for driver in models.Driver],
        help='Provider driver, overriding the configuration file',
    )
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-V', '--version', action='version', version=version)

    resources = parser.add_subparsers(dest='resource', required=True)

    deployment = resources.add_parser('deployment', help='Deployments')
    deployment_ops = deployment.add_subparsers(dest='operation', required=True)
    find = deployment_ops.add_parser('find')
    find.add_argument('repo', metavar='REPO')
    find.add_argument('deployment_id', metavar='ID')
    listing = deployment_ops.add_parser('list')
    listing.add_argument('repo', metavar='REPO')
    _add_list_arguments(listing)
    create = deployment_ops.add_parser('create')
    create.add_argument('repo', metavar='REPO')
    create.add_argument('--ref', required=True)
    create.add_argument('--sha', default='')
    create.add_argument('--task', default='')
    create.add_argument('--environment', default='')
    create.add_argument('--description', default='')
    create.add_argument('--production', action='store_true')
    create.add_argument('--transient', action='store_true')

    status = resources.add_parser('status', help='Deployment statuses')
    status_ops = status.add_subparsers(dest='operation', required=True)
    find = status_ops.add_parser('find')
    find.add_argument('repo', metavar='REPO')
    find.add_argument('deployment_id', metavar='DEPLOYMENT')
    find.add_argument('status_id', metavar='ID')
    listing = status_ops.add_parser('list')
    listing.add_argument('repo', metavar='REPO')
    listing.add_argument('deployment_id', metavar='DEPLOYMENT')
    _add_list_arguments(listing)
    create = status_ops.add_parser('create')
    create.add_argument('repo', metavar='REPO')
    create.add_argument('deployment_id', metavar='DEPLOYMENT')
    create.add_argument(
        '--state',
        required=True,
        choices=[
            state.value
            for state in models.DeploymentState
            if state != models.DeploymentState.unknown
        ],
    )
    create.add_argument('--description', default='')
    create.add_argument('--environment', default='')
    create.add_argument('--target-url', default='')
    create.add_argument('--log-url', default='')
    create.add_argument('--environment-url', default='')
    create.add_argument('--auto-inactive', action='store_true')

    installation = resources.add_parser(
        'installation', help='App installations'
    )
    installation_ops = installation.add_subparsers(
        dest='operation', required=True
    )
    for operation, metavar in (
        ('repo', 'REPO'),
        ('org', 'ORG'),
        ('user', 'USER'),
    ):
        installation_ops.add_parser(operation).add_argument(
            'target', metavar=metavar
        )

    return parser.parse_args(args)


async def execute(
    scm: client.Client, args: argparse.Namespace
) -> services.Result:
    """Dispatch the parsed command to the matching service operation."""
    deployments, apps = scm.deployments, scm.apps
    match (args.resource, args.operation):
        case ('deployment', 'find'):
            return await deployments.find(args.repo, args.deployment_id)
        case ('deployment', 'list'):
            return await deployments.list(args.repo, _list_options(args))
        case ('deployment', 'create'):
            return await deployments.create(
                args.repo,
                models.DeploymentInput(
                    ref=args.ref,
                    sha=args.sha,
                    task=args.task,
                    environment=args.environment,
                    description=args.description,
                    production_environment=args.production,
                    transient_environment=args.transient,
                ),
            )
        case ('status', 'find'):
            return await deployments.find_status(
                args.repo, args.deployment_id, args.status_id
            )
        case ('status', 'list'):
            return await deployments.list_status(
                args.repo, args.deployment_id, _list_options(args)
            )
        case ('status', 'create'):
            return await deployments.create_status(
                args.repo,
                args.deployment_id,
                models.DeploymentStatusInput(
                    state=args.state,
                    description=args.description,
                    environment=args.environment,
                    target_link=args.target_url,
                    log_link=args.log_url,
                    environment_link=args.environment_url,
                    auto_inactive=args.auto_inactive,
                ),
            )
        case ('installation', 'repo'):
            return await apps.get_repository_installation(args.target)
        case ('installation', 'org'):
            return await apps.get_organisation_installation(args.target)
        case ('installation', 'user'):
            return await apps.get_user_installation(args.target)
    raise ValueError(f'Unsupported command: {args.resource} {args.operation}')


async def run(
    args: argparse.Namespace, configuration: models.Configuration
) -> int:
    async with drivers.new_client(configuration) as scm:
        value, response, error = await execute(scm, args)
    LOGGER.debug(
        'Request %s: status=%s rate=%s/%s page=%s',
        response.id or '-',
        response.status,
        response.rate.remaining,
        response.rate.limit,
        response.page.next or '-',
    )
    if error is not None:
        LOGGER.error('%s (%s)', error, error.kind)
        return 1
    print(utils.dump_json(value))
    return 0


def main() -> None:
    args = parse_args()
    configure_logging(args.verbose)

    configuration = load_configuration(args.config, args.driver)
    if args.config:
        args.config.close()

    LOGGER.debug('scm-client v%s using %s', version, configuration.driver)
    try:
        sys.exit(asyncio.run(run(args, configuration)))
    except KeyboardInterrupt:
        LOGGER.info('Interrupted, exiting')
