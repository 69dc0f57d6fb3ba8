"""Configuration management for proccontext."""

from pathlib import Path
from typing import List, Literal, Optional
import os
import yaml
from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """How parsed command lines are reported."""

    format: Literal["table", "json", "csv"] = "table"
    show_args: bool = True


class NamingConfig(BaseModel):
    """Service naming policy settings."""

    tag_prefix: str = "process_context"
    fallback_to_executable: bool = True


class ProcContextConfig(BaseModel):
    """Main proccontext configuration."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "ProcContextConfig":
        """Load configuration from YAML file."""
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)
        return cls(**(data or {}))

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        with open(config_path, "w") as f:
            yaml.dump(self.model_dump(), f, default_flow_style=False)


CONFIG_ENV_VAR = "PROCCONTEXT_CONFIG"


def config_search_paths() -> List[Path]:
    """Candidate config files, most specific first."""
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path("proccontext.yaml"))
    paths.append(Path.home() / ".proccontext" / "config.yaml")
    return paths


def load_config(config_path: Optional[str] = None) -> ProcContextConfig:
    """Load configuration from an explicit path, the first existing search path, or defaults.

    An explicit path that does not exist is an error; search paths are optional.
    """
    if config_path:
        return ProcContextConfig.load_from_file(Path(config_path))

    for path in config_search_paths():
        if path.is_file():
            return ProcContextConfig.load_from_file(path)

    return ProcContextConfig()
