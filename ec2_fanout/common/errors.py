#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from typing import Optional


class Ec2FanoutError(Exception):
    """Base class for every error raised or returned by ec2_fanout."""


class ConfigurationError(Ec2FanoutError):
    """The AWS config file is missing or cannot be parsed. Fatal for the run."""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        msg = f"cannot read AWS config file {path}"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)


class TaskError(Ec2FanoutError):
    """
    Failure of a single (profile, region) task.
    Returned inside a TaskResult, printed by the runner, never fatal.
    """

    stage = "task"

    def __init__(self, profile: str, region: str, cause: BaseException):
        self.profile = profile
        self.region = region
        self.cause = cause
        super().__init__(f"[{profile}/{region}] {self.stage} error: {cause}")


class CredentialError(TaskError):
    stage = "config"


class ServiceError(TaskError):
    stage = "describe"
