import argparse
import contextlib
import http
import io
import json
import logging
import unittest
from unittest import mock

import colorlog

from scm_client import cli, models
from scm_client.drivers import github
from tests import base


class TestParseArgs(unittest.TestCase):
    def test_deployment_find(self) -> None:
        args = cli.parse_args(['deployment', 'find', 'octocat/example', '1'])

        self.assertEqual(args.resource, 'deployment')
        self.assertEqual(args.operation, 'find')
        self.assertEqual(args.repo, 'octocat/example')
        self.assertEqual(args.deployment_id, '1')
        self.assertIsNone(args.config)
        self.assertFalse(args.verbose)

    def test_list_defaults(self) -> None:
        args = cli.parse_args(['status', 'list', 'octocat/example', '1'])

        self.assertEqual(args.page, 1)
        self.assertEqual(args.per_page, 30)

    def test_status_create(self) -> None:
        args = cli.parse_args(
            [
                '--driver',
                'github',
                'status',
                'create',
                'octocat/example',
                '1',
                '--state',
                'success',
                '--target-url',
                'https://example.com/deploy/1',
                '--auto-inactive',
            ]
        )

        self.assertEqual(args.driver, 'github')
        self.assertEqual(args.state, 'success')
        self.assertEqual(args.target_url, 'https://example.com/deploy/1')
        self.assertTrue(args.auto_inactive)

    def test_invalid_state(self) -> None:
        with (
            contextlib.redirect_stderr(io.StringIO()),
            self.assertRaises(SystemExit),
        ):
            cli.parse_args(
                ['status', 'create', 'o/r', '1', '--state', 'unknown']
            )

    def test_missing_command(self) -> None:
        with (
            contextlib.redirect_stderr(io.StringIO()),
            self.assertRaises(SystemExit),
        ):
            cli.parse_args([])


class TestLoadConfiguration(unittest.TestCase):
    def test_load_from_toml(self) -> None:
        config_file = io.StringIO(
            'driver = "gitlab"\n'
            'timeout = 10\n'
            '[gitlab]\n'
            'api_key = "glpat_test"\n'
            'hostname = "gitlab.example.com"\n'
        )

        config = cli.load_configuration(config_file)

        self.assertEqual(config.driver, models.Driver.gitlab)
        self.assertEqual(config.timeout, 10.0)
        self.assertEqual(config.gitlab.hostname, 'gitlab.example.com')
        self.assertEqual(
            config.gitlab.api_key.get_secret_value(), 'glpat_test'
        )

    def test_driver_override(self) -> None:
        config = cli.load_configuration(
            io.StringIO('driver = "gitlab"\n'), driver='github'
        )
        self.assertEqual(config.driver, models.Driver.github)

    def test_without_file(self) -> None:
        config = cli.load_configuration(None)
        self.assertEqual(config.driver, models.Driver.github)


class TestConfigureLogging(unittest.TestCase):
    def test_configure_logging(self) -> None:
        with mock.patch('logging.basicConfig') as basic_config:
            cli.configure_logging(True)

        kwargs = basic_config.call_args.kwargs
        self.assertEqual(kwargs['level'], logging.DEBUG)
        self.assertIsInstance(
            kwargs['handlers'][0].formatter, colorlog.ColoredFormatter
        )
        self.assertEqual(
            logging.getLogger('httpx').level, logging.WARNING
        )


class TestRun(base.AsyncTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.configuration = models.Configuration(
            github=models.GitHubConfiguration(api_key='ghp_test_token')
        )
        patcher = mock.patch(
            'scm_client.drivers.new_client',
            side_effect=lambda configuration: github.new(
                configuration.github, self.http_client_transport
            ),
        )
        patcher.start()
        self.addCleanup(patcher.stop)

    async def test_find_prints_json(self) -> None:
        self.http_client_side_effect = base.fixture_response(
            http.HTTPStatus.OK, 'github/deploy.json'
        )
        args = cli.parse_args(['deployment', 'find', 'octocat/example', '1'])

        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = await cli.run(args, self.configuration)

        self.assertEqual(status, 0)
        output = json.loads(stdout.getvalue())
        self.assertEqual(output['id'], '1')
        self.assertEqual(output['environment'], 'production')

    async def test_list_prints_array(self) -> None:
        self.http_client_side_effect = base.fixture_response(
            http.HTTPStatus.OK, 'github/deploy_statuses.json'
        )
        args = cli.parse_args(['status', 'list', 'octocat/example', '1'])

        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = await cli.run(args, self.configuration)

        self.assertEqual(status, 0)
        self.assertEqual(
            [item['state'] for item in json.loads(stdout.getvalue())],
            ['success', 'pending'],
        )
        self.assertEqual(
            dict(self.http_requests[0].url.params),
            {'page': '1', 'per_page': '30'},
        )

    async def test_error_returns_failure(self) -> None:
        self.http_client_side_effect = base.fixture_response(
            http.HTTPStatus.NOT_FOUND, 'github/error.json'
        )
        args = cli.parse_args(['installation', 'repo', 'dev/null'])

        with self.assertLogs('scm_client.cli', logging.ERROR) as logs:
            status = await cli.run(args, self.configuration)

        self.assertEqual(status, 1)
        self.assertIn('Not Found', logs.output[0])
        self.assertEqual(
            str(self.http_requests[0].url),
            'https://api.github.com/repos/dev/null/installation',
        )

    async def test_create_deployment(self) -> None:
        self.http_client_side_effect = base.fixture_response(
            http.HTTPStatus.CREATED, 'github/deploy_create.json'
        )
        args = cli.parse_args(
            [
                'deployment',
                'create',
                'octocat/example',
                '--ref',
                'topic-branch',
                '--environment',
                'qa',
                '--transient',
            ]
        )

        with contextlib.redirect_stdout(io.StringIO()):
            status = await cli.run(args, self.configuration)

        self.assertEqual(status, 0)
        body = json.loads(self.http_requests[0].content)
        self.assertEqual(body['ref'], 'topic-branch')
        self.assertEqual(body['environment'], 'qa')
        self.assertTrue(body['transient_environment'])

    async def test_organisation_installation(self) -> None:
        self.http_client_side_effect = base.fixture_response(
            http.HTTPStatus.OK, 'github/app_repo_install.json'
        )
        args = cli.parse_args(['installation', 'org', 'github'])

        with contextlib.redirect_stdout(io.StringIO()):
            await cli.run(args, self.configuration)

        self.assertEqual(
            str(self.http_requests[0].url),
            'https://api.github.com/orgs/github/installation',
        )


class TestMain(unittest.TestCase):
    def test_main(self) -> None:
        with (
            mock.patch(
                'sys.argv',
                ['scm-client', 'deployment', 'find', 'octocat/example', '1'],
            ),
            mock.patch.object(cli, 'configure_logging') as configure_logging,
            mock.patch.object(cli, 'run', new=mock.MagicMock()) as run,
            mock.patch('asyncio.run', return_value=0) as asyncio_run,
            self.assertRaises(SystemExit) as cm,
        ):
            cli.main()

        self.assertEqual(cm.exception.code, 0)
        configure_logging.assert_called_once_with(False)
        asyncio_run.assert_called_once_with(run.return_value)
        args, configuration = run.call_args.args
        self.assertIsInstance(args, argparse.Namespace)
        self.assertEqual(configuration.driver, models.Driver.github)
