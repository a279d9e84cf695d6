"""Engine settings for ``Dag``."""

import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from dagkit.config import ConfigAccessor

from .traversal import BreadthFirstSearch, TraversalAlgorithm, get_traversal_algorithm

logger = logging.getLogger(__name__)

CONFIG_SECTION = "dag"


class DagConfig(BaseModel):
    """Settings injected into a ``Dag`` at construction."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    traversal_algorithm: TraversalAlgorithm = Field(
        default_factory=BreadthFirstSearch,
        description="Algorithm used for cycle detection",
    )
    memoize_validation: bool = Field(
        True, description="Reuse the last add-edge validation for the same pair"
    )

    @field_validator("traversal_algorithm", mode="before")
    @classmethod
    def validate_traversal_algorithm(cls, v: Any) -> Any:
        if v is None:
            raise ValueError("traversal_algorithm cannot be None")
        if isinstance(v, str):
            return get_traversal_algorithm(v)
        return v

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> "DagConfig":
        """
        Build a config from the ``[dag]`` section of a config file.

        Recognised keys are ``traversal`` (``breadth_first`` or ``depth_first``)
        and ``memoize_validation`` (boolean). Missing keys keep their defaults.

        Args:
            config_path: Path to the config file. If None, uses the default path.
        """
        accessor = ConfigAccessor(config_path)
        values = {}

        traversal = accessor.get(CONFIG_SECTION, "traversal")
        if traversal is not None:
            values["traversal_algorithm"] = traversal

        memoize = accessor.getboolean(CONFIG_SECTION, "memoize_validation")
        if memoize is not None:
            values["memoize_validation"] = memoize

        logger.debug(f"Loaded DAG config from {accessor.config_path}: {values}")
        return cls(**values)
