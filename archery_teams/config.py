# archery_teams/config.py
from __future__ import annotations
import logging
import os
import textwrap
from typing import Any, Dict, Optional

import yaml

from .constants import (
    BAREBOW,
    COMPOUND,
    DEFAULT_PATIENCE,
    DEFAULT_REPORT_FILE,
    DEFAULT_ROSTER_FILES,
    RECURVE,
)
from .models import AppConfig

# ===== App defaults =====
DEFAULT_CONFIG = {
    "compound_file": DEFAULT_ROSTER_FILES[COMPOUND],
    "recurve_file": DEFAULT_ROSTER_FILES[RECURVE],
    "barebow_file": DEFAULT_ROSTER_FILES[BAREBOW],
    "output_file": DEFAULT_REPORT_FILE,
    "patience": DEFAULT_PATIENCE,
    "random_seed": None,
    "log_level": "INFO",
    "progress_interval": 0,
}

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    numeric_level = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)


def load_config_file(path: str, overrides: Optional[Dict[str, Any]] = None) -> AppConfig:
    """YAML mapping with AppConfig keys; non-None overrides win over the file."""
    with open(path, "r", encoding="utf-8") as f:
        try:
            obj = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Config file {path} is not valid YAML: {exc}") from exc
    if not isinstance(obj, dict):
        raise ValueError(f"Config file {path} must contain a mapping of settings.")
    unknown = sorted(set(obj) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown setting(s) in {path}: {', '.join(unknown)}")
    return build_config(obj, overrides)


def build_config(base: Optional[Dict[str, Any]] = None, overrides: Optional[Dict[str, Any]] = None) -> AppConfig:
    values = dict(DEFAULT_CONFIG)
    values.update(base or {})
    values.update({k: v for k, v in (overrides or {}).items() if v is not None})
    return AppConfig(**values)


def ensure_sample_rosters(directory: str = "assets") -> Dict[str, str]:
    """Write the sample roster files into `directory` unless already there."""
    os.makedirs(directory, exist_ok=True)
    written = {}
    for cat, text in DEFAULT_SAMPLE_ROSTERS.items():
        path = os.path.join(directory, DEFAULT_ROSTER_FILES[cat])
        if not os.path.exists(path):
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        written[cat] = path
    return written


# ===== Sample rosters (one line per archer: name, qualification score) =====
DEFAULT_SAMPLE_ROSTERS = {
    COMPOUND: textwrap.dedent("""\
        Alex Carter, 682
        Blake Diaz, 655
        Casey Ellis, 701
        Drew Fox, 640
        Emery Gray, 668
        Fin Hayes, 0
        Gabe Irwin, 690
        """),
    RECURVE: textwrap.dedent("""\
        Harper Jones, 598
        Izzy Kim, 623
        Jordan Lee, 571
        Kai Miller, 610
        Lane Novak, 585
        Morgan Ortiz, 604
        """),
    BAREBOW: textwrap.dedent("""\
        Nico Park, 512
        Owen Quinn, 488
        Parker Reed, 530
        Quinn Shaw, 475
        Riley Tran, 501
        Sky Underwood, 520
        """),
}
