import datetime
import os
import unittest
from unittest import mock

import pydantic

from scm_client import models, services


class ModelsTestCase(unittest.TestCase):
    def test_zero_values(self) -> None:
        deployment = models.Deployment()
        self.assertEqual(deployment.id, '')
        self.assertIsNone(deployment.author)
        self.assertIsNone(deployment.created)
        self.assertEqual(models.Installation().account, models.Account())

    def test_frozen(self) -> None:
        deployment = models.Deployment(id='1')
        with self.assertRaises(pydantic.ValidationError):
            deployment.id = '2'

    def test_equality_and_hash(self) -> None:
        first = models.DeploymentStatus(id='1', state='success')
        second = models.DeploymentStatus(id='1', state='success')
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(first, models.Deployment(id='1'))

    def test_unknown_state(self) -> None:
        self.assertEqual(
            models.DeploymentState('waiting'), models.DeploymentState.unknown
        )

    def test_rate_reset_at(self) -> None:
        rate = models.Rate(limit=60, remaining=0, reset=1512076018)
        self.assertEqual(
            rate.reset_at,
            datetime.datetime(2017, 11, 30, 21, 6, 58, tzinfo=datetime.UTC),
        )


class ConfigurationTestCase(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            config = models.Configuration()
        self.assertEqual(config.driver, models.Driver.github)
        self.assertEqual(config.github.hostname, 'api.github.com')
        self.assertEqual(config.gitlab.hostname, 'gitlab.com')
        self.assertIsNone(config.github.api_key)
        self.assertEqual(config.timeout, 30.0)

    def test_tokens_from_environment(self) -> None:
        with mock.patch.dict(
            os.environ,
            {'GITHUB_TOKEN': 'ghp_env', 'GITLAB_TOKEN': 'glpat_env'},
        ):
            config = models.Configuration()
        self.assertEqual(config.github.api_key.get_secret_value(), 'ghp_env')
        self.assertEqual(config.gitlab.api_key.get_secret_value(), 'glpat_env')

    def test_invalid_driver(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            models.Configuration(driver='bitbucket')


class ResultTestCase(unittest.TestCase):
    def test_unpack(self) -> None:
        value, response, error = services.Result(
            models.Deployment(id='1'), models.ResponseMeta(status=200)
        )
        self.assertEqual(value.id, '1')
        self.assertEqual(response.status, 200)
        self.assertIsNone(error)

    def test_unwrap(self) -> None:
        result = services.Result(
            models.Deployment(id='1'), models.ResponseMeta()
        )
        self.assertTrue(result.ok)
        self.assertEqual(result.unwrap().id, '1')

    def test_not_supported(self) -> None:
        result = services.not_supported(list)
        self.assertEqual(result.value, [])
        self.assertFalse(result.ok)
