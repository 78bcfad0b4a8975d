import logging
import os
from dataclasses import dataclass

from api.client import EDSM_API_URL, ApiClient
from data.config import DezhnevConfig, load_config
from policy.executor import CommandExecutor


@dataclass
class AppContext:
    config: DezhnevConfig
    client: ApiClient
    executor: CommandExecutor


def build_app(config_dir: str | None = None) -> AppContext:
    logging.info("Dezhnev initializing")

    config = load_config(config_dir)
    logging.info(f"Output directory: {config.output_dir or os.getcwd()}")

    client = ApiClient(os.getenv("EDSM_API_URL") or EDSM_API_URL)
    executor = CommandExecutor(config, client.systems.fetch_systems_in_sphere)

    logging.info("Ready.")
    return AppContext(config=config, client=client, executor=executor)
