# ec2_fanout/common/aws_common.py  (session + client plumbing, per profile/region)
#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import boto3
from botocore.config import Config as BotoConfig
from botocore.exceptions import (
    ConfigNotFound,
    ConfigParseError,
    CredentialRetrievalError,
    InvalidConfigError,
    NoCredentialsError,
    NoRegionError,
    PartialCredentialsError,
    ProfileNotFound,
    SSOTokenLoadError,
    TokenRetrievalError,
    UnauthorizedSSOTokenError,
)

# SDK standard retry mode with its default attempts; no retry loop of our own.
CFG = BotoConfig(retries={"mode": "standard"})

# Failures of profile/credential resolution, as opposed to the remote call itself.
CREDENTIAL_ERRORS = (
    ProfileNotFound,
    ConfigNotFound,
    ConfigParseError,
    InvalidConfigError,
    CredentialRetrievalError,
    NoRegionError,
    NoCredentialsError,
    PartialCredentialsError,
    TokenRetrievalError,
    SSOTokenLoadError,
    UnauthorizedSSOTokenError,
)

def session_for_profile(profile: str, region: str) -> boto3.session.Session:
    return boto3.Session(profile_name=profile, region_name=region)

def ec2_client(session: boto3.session.Session, region: str):
    return session.client("ec2", region_name=region, config=CFG)
