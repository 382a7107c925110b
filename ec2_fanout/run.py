#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Running EC2 instances per profile/region — sequential vs parallel
Reads every [profile X] from the AWS config file, counts running instances in
each (profile, region) pair, once in a plain loop and once fully fanned out,
and prints how long each pass took.

Usage:
  python -m ec2_fanout [--config-file PATH] [--mode both|sequential|parallel] [-v]

Exit codes:
  0  finished (individual profile/region failures are only reported on stderr)
  1  AWS config file missing or unreadable
"""

import argparse
import logging
import sys
from typing import List, Optional

from ec2_fanout.common.errors import ConfigurationError
from ec2_fanout.common.profiles import default_config_path, load_profiles
from ec2_fanout.config import RunConfig
from ec2_fanout.runners import run_parallel, run_sequential, timed

logger = logging.getLogger(__name__)

MODES = ("both", "sequential", "parallel")

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Count running EC2 instances per profile/region, sequential vs parallel")
    ap.add_argument("--config-file", default=None,
                    help="AWS config file to read profiles from (default: $AWS_CONFIG_FILE or ~/.aws/config)")
    ap.add_argument("--mode", choices=MODES, default="both",
                    help="Which pass(es) to run. Default: both, sequential first.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return ap.parse_args(argv)

def main(argv: Optional[List[str]] = None, config: Optional[RunConfig] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stderr,
    )

    config = config or RunConfig()
    try:
        profiles = load_profiles(args.config_file or default_config_path())
    except ConfigurationError as e:
        print(f"Failed to get profiles: {e}", file=config.stderr)
        return 1

    logger.info("%d profile(s) x %d region(s)", len(profiles), len(config.regions))

    if args.mode in ("both", "sequential"):
        logger.debug("sequential pass")
        timed(lambda: run_sequential(profiles, config), config.stdout)
    if args.mode in ("both", "parallel"):
        logger.debug("parallel pass")
        timed(lambda: run_parallel(profiles, config), config.stdout)
    return 0

if __name__ == "__main__":
    sys.exit(main())
