"""
Calculator settings, read from environment variables:

    CALCULATOR_LOG_LEVEL   DEBUG, INFO, WARNING (default), ERROR
    CALCULATOR_PROMPT      REPL prompt, "> " by default
    CALCULATOR_SHOW_TREE   print expression tree before the result in the REPL
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Config:
    log_level: str = "WARNING"
    prompt: str = "> "
    show_tree: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        config = cls()

        log_level = env.get("CALCULATOR_LOG_LEVEL", config.log_level).upper()
        if isinstance(logging.getLevelName(log_level), int):
            config.log_level = log_level
        config.prompt = env.get("CALCULATOR_PROMPT", config.prompt)
        config.show_tree = env.get("CALCULATOR_SHOW_TREE", "").strip().lower() in TRUTHY
        return config
