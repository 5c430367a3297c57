"""Miscellaneous non-math stuff."""
import os
import logging
import yaml

logger = logging.getLogger(__name__)

CONFIG_FILENAME = 'hvec.yml'

def load_config() -> dict:
    for path in os.curdir, os.path.expanduser('~'):
        filename = os.path.join(path, CONFIG_FILENAME)
        try:
            with open(filename, 'rt') as file:
                config = yaml.load(file, Loader=yaml.FullLoader)
        except FileNotFoundError:
            continue
        logger.debug(f'Loaded configuration from {os.path.abspath(filename)}.')
        # Empty file parses to None.
        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ValueError(f'{os.path.abspath(filename)}: expected a mapping, got {type(config).__name__}.')
        return config
    return {}
