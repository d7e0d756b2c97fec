"""Combined parameters of the bootstrap command."""

from __future__ import annotations

from dataclasses import dataclass

from bootstrap_params.params.bootstrap import BootstrapParams, build_bootstrap_params
from bootstrap_params.params.dependency import DependencyParams, build_dependency_params
from bootstrap_params.schemas import BootstrapOptions, DependencyOptions
from bootstrap_params.validation import Valid, Validated, combine, valid


@dataclass(frozen=True)
class BootstrapCommandParams:
    """Dependency selection and launcher settings of one bootstrap run."""

    dependency: DependencyParams
    bootstrap: BootstrapParams

    def to_dict(self) -> dict[str, object]:
        return {
            "dependency": self.dependency.to_dict(),
            "bootstrap": self.bootstrap.to_dict(),
        }


def build_bootstrap_command_params(
    dependency_options: DependencyOptions,
    bootstrap_options: BootstrapOptions,
    forced_scala_version: str | None = None,
) -> Validated[BootstrapCommandParams]:
    """Validate both option groups, reporting dependency errors first."""
    result = combine(
        build_dependency_params(dependency_options, forced_scala_version),
        build_bootstrap_params(bootstrap_options, native=dependency_options.native),
    )
    match result:
        case Valid(value=(dependency, bootstrap)):
            return valid(BootstrapCommandParams(dependency=dependency, bootstrap=bootstrap))
        case failure:
            return failure
