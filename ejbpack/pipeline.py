"""Per-descriptor packaging pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from .archive import JarWriter
from .collector import collect_artifacts
from .config import PackagingConfig
from .errors import PackagingError
from .generator import EjbcGenerator, Generator
from .logging import get_logger
from .models import Descriptor, GeneratorOptions, OutputArtifact, PackagingOutcome
from .naming import derive_output_base_name
from .staleness import input_timestamps, is_stale
from .validation import validate_configuration


@dataclass
class PipelineReport:
    """Outcomes and failures of a multi-descriptor run."""

    outcomes: List[PackagingOutcome] = field(default_factory=list)
    failures: List[Tuple[str, PackagingError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


class DeploymentPipeline:
    """Validates, generates, collects and assembles one descriptor at a time."""

    def __init__(
        self,
        config: PackagingConfig,
        generator: Generator | None = None,
        writer: JarWriter | None = None,
    ) -> None:
        self.config = config
        self.generator = generator or EjbcGenerator()
        self.writer = writer or JarWriter()
        self.logger = get_logger("pipeline")

    def descriptor_for(self, relative_path: str) -> Descriptor:
        return Descriptor(
            relative_path=relative_path,
            root=self.config.descriptor_dir,
            name_terminator=self.config.name_terminator,
            standard_basename=self.config.standard_basename,
            vendor_prefix=self.config.vendor_prefix,
        )

    def output_path(self, descriptor: Descriptor) -> Path:
        base_name = derive_output_base_name(
            descriptor.relative_path,
            descriptor.name_terminator,
            self.config.base_jar_name,
        )
        archive = self.config.dest_dir / f"{base_name}{self.config.suffix}"
        self.logger.debug("Archive file name: %s", archive)
        return archive

    def process(self, relative_path: str) -> PackagingOutcome:
        """Package a single descriptor, raising ``PackagingError`` on failure."""
        descriptor = self.descriptor_for(relative_path)
        self.logger.info(
            "Processing %s (and %s)", descriptor.relative_path, descriptor.vendor_name
        )
        self.logger.debug("Vendor descriptor path: %s", descriptor.vendor_path)
        validate_configuration(descriptor, self.config)

        options = GeneratorOptions(
            retain_generated_source=self.config.keep_generated,
            verbose_output=self.config.debug,
            tool_home=self.config.ias_home,
        )
        result = self.generator.invoke(
            descriptor.path,
            descriptor.vendor_path,
            self.config.src_dir,
            list(self.config.classpath),
            options,
        )
        inventory = collect_artifacts(
            result,
            self.config.descriptor_dir,
            descriptor.directory_prefix,
            descriptor.vendor_path,
        )

        output = OutputArtifact.from_path(self.output_path(descriptor))
        if not is_stale(output, input_timestamps(inventory)):
            self.logger.info("%s is up to date", output.path)
            return PackagingOutcome(
                descriptor=descriptor,
                archive=output.path,
                built=False,
                display_name=result.display_name,
            )

        self.writer.write(inventory, output.path)
        return PackagingOutcome(
            descriptor=descriptor,
            archive=output.path,
            built=True,
            display_name=result.display_name,
        )

    def run(self, relative_paths: Iterable[str]) -> PipelineReport:
        """Process descriptors in order.

        Without ``continue_on_failure`` the first error propagates; otherwise
        it is logged and recorded in the report before moving on.
        """
        report = PipelineReport()
        for relative_path in relative_paths:
            try:
                report.outcomes.append(self.process(relative_path))
            except PackagingError as exc:
                if not self.config.continue_on_failure:
                    raise
                self.logger.error("Failed to package %s: %s", relative_path, exc)
                report.failures.append((relative_path, exc))
        return report


__all__ = ["DeploymentPipeline", "PipelineReport"]
