#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Running EC2 instances for one (profile, region) pair.

One DescribeInstances call, no filters; instances are counted when
State.Name == "running". Failures come back inside the TaskResult, wrapped with
the profile/region that produced them, so the caller decides what to do.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ec2_fanout.common.aws_common import CREDENTIAL_ERRORS, ec2_client, session_for_profile
from ec2_fanout.common.errors import CredentialError, ServiceError, TaskError

logger = logging.getLogger(__name__)

RUNNING = "running"

SessionFactory = Callable[[str, str], boto3.session.Session]


@dataclass(frozen=True)
class TaskResult:
    profile: str
    region: str
    count: Optional[int] = None
    error: Optional[TaskError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def count_running(response: Dict[str, Any]) -> int:
    """Count running instances across every reservation of a DescribeInstances response."""
    count = 0
    for res in response.get("Reservations", []) or []:
        for inst in res.get("Instances", []) or []:
            state = (inst.get("State") or {}).get("Name")
            if state == RUNNING:
                count += 1
    return count


def count_running_instances(
    profile: str,
    region: str,
    session_factory: SessionFactory = session_for_profile,
) -> TaskResult:
    try:
        session = session_factory(profile, region)
        # client creation resolves credentials and validates the region name
        ec2 = ec2_client(session, region)
    except CREDENTIAL_ERRORS as e:
        return TaskResult(profile, region, error=_wrap(CredentialError, profile, region, e))
    except (ClientError, BotoCoreError) as e:
        return TaskResult(profile, region, error=_wrap(ServiceError, profile, region, e))

    try:
        resp = ec2.describe_instances()
    except CREDENTIAL_ERRORS as e:
        return TaskResult(profile, region, error=_wrap(CredentialError, profile, region, e))
    except (ClientError, BotoCoreError) as e:
        return TaskResult(profile, region, error=_wrap(ServiceError, profile, region, e))

    count = count_running(resp)
    logger.debug("[%s/%s] %d running", profile, region, count)
    return TaskResult(profile, region, count=count)


def _wrap(kind, profile: str, region: str, cause: BaseException) -> TaskError:
    err = kind(profile, region, cause)
    err.__cause__ = cause
    logger.debug("%s", err)
    return err
