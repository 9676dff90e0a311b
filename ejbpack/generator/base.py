"""Contract for stub/skeleton generators."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

from ..models import GenerationResult, GeneratorOptions


class Generator(ABC):
    """Produces remote-invocation glue for a descriptor pair."""

    @abstractmethod
    def invoke(
        self,
        primary_descriptor: Path,
        vendor_descriptor: Path,
        source_root: Path,
        classpath: Sequence[Path],
        options: GeneratorOptions,
    ) -> GenerationResult:
        """Run generation and report the resulting artifacts.

        Implementations raise ``GenerationError`` for any failure of the
        underlying tool, chaining the original exception.
        """
