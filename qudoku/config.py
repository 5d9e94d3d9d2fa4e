"""
Module for ``qudoku``'s configuration.

This module can be used to:

* define default configuration settings
* load a configuration from a JSON document or file
* validate a configuration
"""

import json
import logging

from .elliptic_curve import YParity
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigVars(object):
    HashToCurve = "hash_to_curve"


class HashToCurveConfig(object):
    """
    Policy for ``hash_to_point``: which y-coordinate parity a lifted point
    must have.
    """

    def __init__(self, parity):
        if parity not in YParity.ALL:
            raise ConfigurationError(f"parity must be in {YParity.ALL}, got {parity!r}")
        self.parity = parity

    def __repr__(self):
        return f"HashToCurveConfig(parity={self.parity!r})"

    def __eq__(self, other):
        if not isinstance(other, HashToCurveConfig):
            return NotImplemented
        return self.parity == other.parity

    @classmethod
    def default(cls):
        return cls(parity=YParity.EVEN)

    @classmethod
    def from_json(cls, json_config):
        """
        Builds a config from a parsed JSON document. Both a bare section
        and a document with a top-level ``hash_to_curve`` section are
        accepted; missing keys keep their default values.
        """
        if not isinstance(json_config, dict):
            raise ConfigurationError(f"expected a JSON object, got {type(json_config)}")

        section = json_config.get(ConfigVars.HashToCurve, json_config)
        if not isinstance(section, dict):
            raise ConfigurationError(
                f"expected a JSON object for {ConfigVars.HashToCurve}, got {type(section)}"
            )
        parity = section.get("parity", cls.default().parity)
        return cls(parity=parity)

    @classmethod
    def from_file(cls, path):
        try:
            with open(path, "r") as f:
                json_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"could not parse config file {path}: {e}") from e

        logger.debug("loaded hash-to-curve config from %s", path)
        return cls.from_json(json_config)
