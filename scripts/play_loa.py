#!/usr/bin/env python3
"""Play Lines of Action in the console, against the machine or another person."""

import argparse
import logging
from dataclasses import replace
from typing import List, Optional

from loa import Game, GameConfig, load_config


def build_config(args: argparse.Namespace) -> GameConfig:
    cfg = load_config(args.config) if args.config else GameConfig()
    overrides = {}
    if args.black is not None:
        overrides["black"] = args.black
    if args.white is not None:
        overrides["white"] = args.white
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.no_prompt:
        overrides["prompt"] = False
    if args.depth is not None:
        overrides["search"] = replace(cfg.search, depth=args.depth)
    return replace(cfg, **overrides)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Lines of Action in the console.")
    parser.add_argument("--config", type=str, default="configs/default.yaml")
    parser.add_argument("--black", choices=["manual", "auto"])
    parser.add_argument("--white", choices=["manual", "auto"])
    parser.add_argument("--seed", type=int)
    parser.add_argument("--depth", type=int, help="Search depth of automated players")
    parser.add_argument("--no-prompt", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    Game(build_config(args)).play()


if __name__ == "__main__":
    main()
