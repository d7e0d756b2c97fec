"""Parameter builders for the bootstrap and dependency options."""

from .bootstrap import BootstrapPackaging, BootstrapParams, PackagingMode, build_bootstrap_params
from .command import BootstrapCommandParams, build_bootstrap_command_params
from .dependency import DependencyParams, build_dependency_params

__all__ = [
    "BootstrapCommandParams",
    "BootstrapPackaging",
    "BootstrapParams",
    "DependencyParams",
    "PackagingMode",
    "build_bootstrap_command_params",
    "build_bootstrap_params",
    "build_dependency_params",
]
