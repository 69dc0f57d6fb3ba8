"""Detection module initialization."""

from .runtime_detector import RuntimeDetector, normalize_executable, split_version, remove_file_path

__all__ = ["RuntimeDetector", "normalize_executable", "split_version", "remove_file_path"]
