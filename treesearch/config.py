"""Configuration module for treesearch."""

from dataclasses import dataclass, field


@dataclass
class TraverserConfig:
    progress_interval: int = 1000


@dataclass
class Config:
    traverser: TraverserConfig = field(default_factory=TraverserConfig)
