import os
from collections.abc import Mapping
from typing import Dict

from snakemake.utils import validate as snakemake_validate

SCHEMA_FILE = os.path.join(os.path.dirname(__file__), 'config.json')


class ImmutableDict(Mapping):
    def __init__(self, data):
        self._data = data

    def __getitem__(self, key):
        return self._data[key]

    def __len__(self):
        return len(self._data)

    def __iter__(self):
        return iter(self._data)


def get_by_prefix(config, prefix):
    return {k.replace(prefix, ''): v for k, v in config.items() if k.startswith(prefix)}


def validate_config(config: Dict) -> Dict:
    """
    check the config against the schema, filling in the default value of any missing setting

    Raises:
        AssertionError: the config does not conform to the schema
    """
    try:
        snakemake_validate(config, SCHEMA_FILE, set_default=True)
    except Exception as err:
        short_msg = '. '.join(
            [line for line in str(err).split('\n') if line.strip()][:3]
        )  # these can get super long
        raise AssertionError(short_msg)
    return config


DEFAULTS: Dict = {}
snakemake_validate(DEFAULTS, SCHEMA_FILE, set_default=True)
DEFAULTS = ImmutableDict(DEFAULTS)  # type: ignore
