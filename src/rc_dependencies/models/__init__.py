"""rc-dependencies data models."""

from rc_dependencies.models.scan_result import FolderWeight, ScanResult

__all__ = [
    "FolderWeight",
    "ScanResult",
]
