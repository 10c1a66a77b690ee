"""YAML configuration of an instance generation batch.

Example ``config.yaml``::

    log_level: INFO
    generator:
      instances: [1, "ta002", 41]
      # or a size class instead of an explicit list:
      # jobs: 50
      # machines: 10
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import yaml

from taillard.errors import ConfigError
from taillard.generator import build_instance, iter_instance_ids
from taillard.models import TaillardInstance
from taillard.seeds import parse_instance_name, validate_instance_id

logger = logging.getLogger("taillard")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_config(config_file: str = "config.yaml") -> dict:
    """Load configuration from YAML file."""
    with open(config_file, "r", encoding="utf-8") as file:
        config = yaml.safe_load(file)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"{config_file}: top level must be a mapping")
    return config


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def _resolve_instance(entry: Any) -> int:
    if isinstance(entry, str):
        return parse_instance_name(entry)
    try:
        return validate_instance_id(entry)
    except TypeError as e:
        raise ConfigError(f"instance entry {entry!r} is neither id nor name") from e


def _check_positive_int(key: str, value: Any) -> None:
    if value is None:
        return
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"generator.{key} must be a positive int, got {value!r}")


@dataclass(frozen=True)
class GeneratorConfig:
    """Selection of instances to generate.

    ``instances`` wins over the ``jobs``/``machines`` size-class filter;
    with neither set, all 120 instances are selected. ``log_level`` is
    applied by :func:`generate_from_config`.
    """

    instances: Optional[List[int]] = None
    jobs: Optional[int] = None
    machines: Optional[int] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.instances is not None:
            if not isinstance(self.instances, list) or not self.instances:
                raise ConfigError("generator.instances must be a non-empty list")
            for entry in self.instances:
                try:
                    validate_instance_id(entry)
                except TypeError as e:
                    raise ConfigError(f"instance entry {entry!r} is not an id") from e
        _check_positive_int("jobs", self.jobs)
        _check_positive_int("machines", self.machines)

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "GeneratorConfig":
        section = config.get("generator") or {}
        if not isinstance(section, dict):
            raise ConfigError("generator section must be a mapping")
        instances = section.get("instances")
        if isinstance(instances, list):
            instances = [_resolve_instance(entry) for entry in instances]
        return cls(
            instances=instances,
            jobs=section.get("jobs"),
            machines=section.get("machines"),
            log_level=str(config.get("log_level", "INFO")),
        )

    @classmethod
    def from_file(cls, config_file: str) -> "GeneratorConfig":
        return cls.from_dict(load_config(config_file))

    def instance_ids(self) -> List[int]:
        if self.instances is not None:
            return list(self.instances)
        ids = list(iter_instance_ids(jobs=self.jobs, machines=self.machines))
        if not ids:
            raise ConfigError(f"no instance of size {self.jobs}x{self.machines}")
        return ids


def generate_from_config(config: GeneratorConfig) -> List[TaillardInstance]:
    """Generate every instance selected by ``config``, in selection order."""
    configure_logging(config.log_level)
    ids = config.instance_ids()
    logger.info("Generating %d Taillard instance(s)", len(ids))
    instances = [build_instance(instance_id) for instance_id in ids]
    logger.info("Generated %s .. %s", instances[0].name, instances[-1].name)
    return instances
