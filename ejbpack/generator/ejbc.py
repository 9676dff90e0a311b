"""Subprocess-backed generator that drives the ``ejbc`` utility."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Sequence

from ..errors import GenerationError
from ..logging import get_logger
from ..models import ArtifactInventory, GenerationResult, GeneratorOptions
from .base import Generator
from .descriptors import EnterpriseBean, read_descriptors

STANDARD_DESCRIPTOR_ENTRY = "META-INF/ejb-jar.xml"


class EjbcGenerator(Generator):
    """Runs ``ejbc`` for every bean whose stubs and skeletons are out of date."""

    EXECUTABLE = "ejbc"

    def __init__(self, runner: Callable[..., str] | None = None) -> None:
        self._runner = runner or self._default_runner
        self.logger = get_logger("generator.ejbc")

    def invoke(
        self,
        primary_descriptor: Path,
        vendor_descriptor: Path,
        source_root: Path,
        classpath: Sequence[Path],
        options: GeneratorOptions,
    ) -> GenerationResult:
        info = read_descriptors(primary_descriptor, vendor_descriptor)
        self.logger.debug(
            "Descriptor %s declares %d bean(s)", primary_descriptor, len(info.beans)
        )

        inventory: ArtifactInventory = {STANDARD_DESCRIPTOR_ENTRY: primary_descriptor}
        classpath_arg = self._classpath_argument(classpath, source_root)
        executable = self._executable(options.tool_home)

        for bean in info.beans:
            self._check_bean_classes(bean, source_root)
            if self._needs_generation(bean, source_root):
                self.logger.info("Generating stubs and skeletons for %s", bean.name)
                args = self._command(bean, executable, source_root, classpath_arg, options)
                output = self._execute(args, cwd=source_root, bean=bean)
                if output.strip():
                    level = logging.INFO if options.verbose_output else logging.DEBUG
                    self.logger.log(level, "ejbc output for %s:\n%s", bean.name, output.rstrip())
            else:
                self.logger.debug("Stubs and skeletons for %s are up to date", bean.name)

            for name in [*bean.bean_classes(), *bean.generated_classes()]:
                inventory[name.class_file] = source_root / name.class_file

        return GenerationResult(
            display_name=info.display_name,
            inventory=inventory,
            dependents=info.cmp_descriptors,
        )

    # ------------------------------------------------------------------
    # Internals

    def _check_bean_classes(self, bean: EnterpriseBean, source_root: Path) -> None:
        for name in bean.bean_classes():
            class_file = source_root / name.class_file
            if not class_file.is_file():
                raise GenerationError(
                    f"The class {name.qualified} used by bean {bean.name} "
                    f"could not be found ({class_file.resolve()}).",
                    path=class_file.resolve(),
                )

    def _needs_generation(self, bean: EnterpriseBean, source_root: Path) -> bool:
        newest_input = max(
            (source_root / name.class_file).stat().st_mtime for name in bean.bean_classes()
        )
        for name in bean.generated_classes():
            generated = source_root / name.class_file
            try:
                modified = generated.stat().st_mtime
            except FileNotFoundError:
                return True
            if modified < newest_input:
                return True
        return False

    def _command(
        self,
        bean: EnterpriseBean,
        executable: str,
        source_root: Path,
        classpath_arg: str,
        options: GeneratorOptions,
    ) -> List[str]:
        args = [executable]
        if options.verbose_output:
            args.append("-debug")
        if bean.kind == "session":
            args.append("-sf" if (bean.session_type or "").lower() == "stateful" else "-sl")
        elif bean.is_cmp:
            args.append("-cmp")
        if bean.iiop:
            args.append("-iiop")
        if options.retain_generated_source:
            args.append("-gs")
        args.extend(["-classpath", classpath_arg, "-d", str(source_root)])
        args.extend(
            [bean.remote.qualified, bean.home.qualified, bean.implementation.qualified]
        )
        return args

    def _execute(self, args: List[str], *, cwd: Path, bean: EnterpriseBean) -> str:
        self.logger.debug("Running %s", " ".join(args))
        try:
            return self._runner(args, cwd=cwd, capture_output=True)
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            message = (
                f"An error occurred while running ejbc for bean {bean.name} "
                f"(exit status {exc.returncode})"
            )
            if detail:
                message = f"{message}: {detail}"
            raise GenerationError(message) from exc
        except OSError as exc:
            raise GenerationError(
                f"Unable to execute {args[0]} for bean {bean.name}: {exc}"
            ) from exc

    def _executable(self, tool_home: Path | None) -> str:
        if tool_home is None:
            return self.EXECUTABLE
        name = f"{self.EXECUTABLE}.bat" if os.name == "nt" else self.EXECUTABLE
        return str(tool_home / "bin" / name)

    @staticmethod
    def _classpath_argument(classpath: Iterable[Path], source_root: Path) -> str:
        entries: Dict[str, None] = {}
        for entry in [*classpath, source_root]:
            entries.setdefault(str(entry), None)
        return os.pathsep.join(entries)

    @staticmethod
    def _default_runner(
        args: Iterable[str],
        *,
        cwd: Path,
        capture_output: bool = False,
    ) -> str:
        completed = subprocess.run(
            list(args),
            cwd=str(cwd),
            check=True,
            text=True,
            capture_output=capture_output,
        )
        return completed.stdout if capture_output else ""


__all__ = ["EjbcGenerator", "STANDARD_DESCRIPTOR_ENTRY"]
