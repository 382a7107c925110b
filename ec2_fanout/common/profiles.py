#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import logging
import os
from typing import List, Optional

from botocore.configloader import raw_config_parse
from botocore.exceptions import ConfigNotFound, ConfigParseError

from ec2_fanout.common.errors import ConfigurationError

logger = logging.getLogger(__name__)

PROFILE_PREFIX = "profile "
DEFAULT_CONFIG_PATH = os.path.join("~", ".aws", "config")

def default_config_path() -> str:
    """$AWS_CONFIG_FILE when set, otherwise ~/.aws/config."""
    path = os.environ.get("AWS_CONFIG_FILE") or DEFAULT_CONFIG_PATH
    return os.path.expanduser(path)

def load_profiles(path: Optional[str] = None) -> List[str]:
    """
    Return the names of the [profile <name>] sections of the AWS config file,
    in file order. [default] and non-profile sections (sso-session, services)
    are not included. An empty list is a valid result.

    Raises ConfigurationError if the file is missing or not valid INI.
    """
    path = path or default_config_path()
    logger.debug("reading profiles from %s", path)
    try:
        sections = raw_config_parse(path, parse_subsections=False)
    except (ConfigNotFound, ConfigParseError) as e:
        raise ConfigurationError(path, e) from e

    profiles = [
        name[len(PROFILE_PREFIX):].strip()
        for name in sections
        if name.startswith(PROFILE_PREFIX)
    ]
    logger.debug("found %d profile(s) in %s", len(profiles), path)
    return profiles
