"""Bootstrap-launcher parameters."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from bootstrap_params.merge_rules import MergeRule, format_rule, parse_rules
from bootstrap_params.params.checks import check_packaging_flags
from bootstrap_params.schemas import BootstrapOptions
from bootstrap_params.validation import Valid, Validated, combine, valid

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "bootstrap"


class PackagingMode(StrEnum):
    """How the launcher carries its classpath."""

    LAUNCHER = "launcher"
    STANDALONE = "standalone"
    HYBRID = "hybrid"
    ASSEMBLY = "assembly"


@dataclass(frozen=True)
class BootstrapPackaging:
    """Packaging flags consumed by the launcher generator."""

    standalone: bool
    hybrid: bool
    embed_files: bool


@dataclass(frozen=True)
class BootstrapParams:
    """Validated bootstrap-launcher parameters."""

    output: Path
    force: bool
    standalone: bool
    embed_files: bool
    java_options: tuple[str, ...]
    assembly: bool
    create_bat_file: bool
    assembly_rules: tuple[MergeRule, ...]
    with_preamble: bool
    deterministic_output: bool
    proguarded: bool
    hybrid: bool
    disable_jar_checking: bool | None = None

    @property
    def bat_output(self) -> Path:
        """Windows batch launcher written next to the main output."""
        return self.output.parent / f"{self.output.name}.bat"

    @property
    def packaging(self) -> BootstrapPackaging:
        return BootstrapPackaging(self.standalone, self.hybrid, self.embed_files)

    @property
    def mode(self) -> PackagingMode:
        if self.assembly:
            return PackagingMode.ASSEMBLY
        if self.standalone:
            return PackagingMode.STANDALONE
        if self.hybrid:
            return PackagingMode.HYBRID
        return PackagingMode.LAUNCHER

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view."""
        return {
            "output": str(self.output),
            "bat_output": str(self.bat_output),
            "mode": self.mode.value,
            "force": self.force,
            "embed_files": self.embed_files,
            "java_options": list(self.java_options),
            "create_bat_file": self.create_bat_file,
            "assembly_rules": [format_rule(rule) for rule in self.assembly_rules],
            "with_preamble": self.with_preamble,
            "deterministic_output": self.deterministic_output,
            "proguarded": self.proguarded,
            "disable_jar_checking": self.disable_jar_checking,
        }


def is_windows() -> bool:
    return sys.platform == "win32"


def normalize_output(output: str | None) -> Path:
    """Trim the output option, fall back to ``bootstrap`` and make it absolute."""
    text = (output or "").strip() or DEFAULT_OUTPUT
    return Path(text).absolute()


def build_bootstrap_params(
    options: BootstrapOptions, native: bool = False
) -> Validated[BootstrapParams]:
    """Validate bootstrap options.

    Parameters
    ----------
    options : BootstrapOptions
        Raw bootstrap options.
    native : bool, default=False
        Whether a Scala Native launcher was requested, which excludes every
        other packaging mode.

    Returns
    -------
    Validated[BootstrapParams]
        The parameters, or every packaging and assembly-rule error found.
    """
    logger.debug("building bootstrap params (native=%s)", native)
    assembly = bool(options.assembly)
    standalone = bool(options.standalone)
    hybrid = bool(options.hybrid)

    result = combine(
        check_packaging_flags(
            assembly=assembly, standalone=standalone, hybrid=hybrid, native=native
        ),
        parse_rules(options.assembly_rule, with_defaults=options.default_assembly_rules),
    )
    match result:
        case Valid(value=(_, rules)):
            create_bat_file = options.bat if options.bat is not None else is_windows()
            return valid(
                BootstrapParams(
                    output=normalize_output(options.output),
                    force=options.force,
                    standalone=standalone,
                    embed_files=options.embed_files,
                    java_options=tuple(options.java_opt),
                    assembly=assembly,
                    create_bat_file=create_bat_file,
                    assembly_rules=rules,
                    with_preamble=options.preamble,
                    deterministic_output=options.deterministic,
                    proguarded=options.proguarded,
                    hybrid=hybrid,
                    disable_jar_checking=options.disable_jar_checking,
                )
            )
        case failure:
            logger.info("bootstrap options rejected with %d error(s)", len(failure.errors))
            return failure
