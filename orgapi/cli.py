import argparse
import logging
import os
from collections import OrderedDict
from typing import Tuple

from dotenv import dotenv_values
from flask import Flask
from pydantic import ValidationError

from orgapi.api import create_app
from orgapi.config import ServiceConfig
from orgapi.mappers.identity import IdentityMapper
from orgapi.repositories.base_repository import OrganisationRepository
from orgapi.repositories.factory import repository_factory
from orgapi.services import OrganisationService

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


class OrganisationsCli:
    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self):
        parser = argparse.ArgumentParser(
            description="Public organisations API: serves organisations read from a graph store."
        )
        parser.add_argument(
            '--env-files',
            type=str,
            nargs='+',
            help="Path to environment files.",
            default=[]
        )
        parser.add_argument(
            '--host',
            type=str,
            help="Interface to listen on. Overrides APP_HOST.",
            default=None
        )
        parser.add_argument(
            '--port',
            type=int,
            help="Port to listen on. Overrides APP_PORT.",
            default=None
        )
        parser.add_argument(
            '--log-level',
            type=str,
            help="Logging level. Overrides LOG_LEVEL.",
            default=None
        )
        return parser

    def _load_from_cli_args(self, args):
        """Helper to load env vars from files specified in CLI args."""
        merged_env = []
        for env_file in args.env_files:
            if os.path.exists(env_file) and os.path.isfile(env_file):
                merged_env += [(k, v) for k, v in dotenv_values(env_file).items() if v is not None]
            else:
                self.parser.error(f"{env_file} file not found.")
                return None
        return OrderedDict(merged_env)

    def load_config(self, args) -> ServiceConfig:
        """
        Build the service configuration.
        Values from --env-files and command line flags take precedence over the environment.
        """
        overrides = self._load_from_cli_args(args)
        if args.host:
            overrides['APP_HOST'] = args.host
        if args.port:
            overrides['APP_PORT'] = args.port
        if args.log_level:
            overrides['LOG_LEVEL'] = args.log_level

        try:
            return ServiceConfig(**overrides)
        except ValidationError as e:
            self.parser.error(f"Invalid configuration: {e}")

    def build_app(self, config: ServiceConfig) -> Tuple[Flask, OrganisationRepository]:
        """Wire adapter, repository, service and Flask app together."""
        repository = repository_factory.get(config)
        service = OrganisationService(
            repository,
            IdentityMapper(config.API_BASE_URL),
            include_related_organisations=config.INCLUDE_RELATED_ORGANISATIONS
        )
        return create_app(service, config), repository

    def run(self, argv=None):
        args = self.parser.parse_args(argv)
        config = self.load_config(args)
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT)
        logger.info("Starting %s with the %s graph backend", config.APP_NAME, config.GRAPH_BACKEND)

        app, repository = self.build_app(config)
        try:
            app.run(host=config.APP_HOST, port=config.APP_PORT)
        finally:
            repository.adapter.close()


def main():
    OrganisationsCli().run()


if __name__ == '__main__':
    main()
