#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, Tuple

from ec2_fanout.ec2_running_count import TaskResult, count_running_instances

DEFAULT_REGIONS: Tuple[str, ...] = (
    "us-east-1",
    "eu-west-1",
    "eu-west-2",
)

Counter = Callable[[str, str], TaskResult]


@dataclass(frozen=True)
class RunConfig:
    """What the runners need: the regions to scan, the per-pair counter and where to report."""

    regions: Tuple[str, ...] = DEFAULT_REGIONS
    counter: Counter = count_running_instances
    out: Optional[TextIO] = None
    err: Optional[TextIO] = None

    # streams resolve at write time so redirected sys.stdout/sys.stderr are honoured
    @property
    def stdout(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self.err if self.err is not None else sys.stderr
