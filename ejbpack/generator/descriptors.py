"""Readers for the standard and vendor EJB deployment descriptors."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple

from ..errors import GenerationError


@dataclass(frozen=True)
class ClassName:
    """A fully qualified Java class name."""

    qualified: str

    @property
    def package(self) -> str:
        """Package with a trailing dot, or an empty string for the default package."""
        index = self.qualified.rfind(".")
        return self.qualified[: index + 1]

    @property
    def simple(self) -> str:
        return self.qualified[self.qualified.rfind(".") + 1 :]

    @property
    def with_underscores(self) -> str:
        return self.qualified.replace(".", "_")

    @property
    def class_file(self) -> str:
        """Archive-relative path of the compiled class."""
        return self.qualified.replace(".", "/") + ".class"

    @property
    def is_system(self) -> bool:
        return self.qualified.startswith(("java.", "javax."))


@dataclass
class EnterpriseBean:
    """Bean declaration merged from the standard and vendor descriptors."""

    name: str
    kind: str
    home: ClassName
    remote: ClassName
    implementation: ClassName
    primary_key: Optional[ClassName] = None
    session_type: Optional[str] = None
    persistence_type: Optional[str] = None
    iiop: bool = False
    cmp_descriptors: List[str] = field(default_factory=list)

    @property
    def is_cmp(self) -> bool:
        return self.kind == "entity" and (self.persistence_type or "").lower() == "container"

    def bean_classes(self) -> List[ClassName]:
        classes = [self.home, self.remote, self.implementation]
        if self.primary_key is not None and not self.primary_key.is_system:
            classes.append(self.primary_key)
        return classes

    def generated_classes(self) -> List[ClassName]:
        """Stub and skeleton classes ejbc produces for this bean."""
        impl_pkg = self.implementation.package
        impl = self.implementation.with_underscores
        remote_pkg, remote = self.remote.package, self.remote.simple
        home_pkg, home = self.home.package, self.home.simple
        names = [
            f"{impl_pkg}ejb_fac_{impl}",
            f"{impl_pkg}ejb_home_{impl}",
            f"{impl_pkg}ejb_skel_{impl}",
            f"{remote_pkg}ejb_kcp_skel_{remote}",
            f"{home_pkg}ejb_kcp_skel_{home}",
            f"{remote_pkg}ejb_kcp_stub_{remote}",
            f"{home_pkg}ejb_kcp_stub_{home}",
        ]
        if self.iiop:
            names.extend(
                [
                    f"org.omg.stub.{remote_pkg}_{remote}_Stub",
                    f"org.omg.stub.{home_pkg}_{home}_Stub",
                    f"{remote_pkg}ejb_RmiCorbaBridge_{remote}",
                    f"{home_pkg}ejb_RmiCorbaBridge_{home}",
                ]
            )
        return [ClassName(name) for name in names]


@dataclass
class DescriptorInfo:
    """Everything the generator needs from a descriptor pair."""

    display_name: Optional[str]
    beans: List[EnterpriseBean]

    @property
    def cmp_descriptors(self) -> Tuple[str, ...]:
        seen: Dict[str, None] = {}
        for bean in self.beans:
            for reference in bean.cmp_descriptors:
                seen.setdefault(reference, None)
        return tuple(seen)


def read_descriptors(standard: Path, vendor: Path) -> DescriptorInfo:
    """Parse the standard descriptor and merge vendor settings into its beans."""
    std_root = _parse(standard)
    display_name = _child_text(std_root, "display-name")

    beans: List[EnterpriseBean] = []
    enterprise_beans = _child(std_root, "enterprise-beans")
    if enterprise_beans is not None:
        for element in enterprise_beans:
            kind = _local_name(element.tag)
            if kind not in {"session", "entity"}:
                continue
            beans.append(_bean_from_element(element, kind, standard))

    by_name = {bean.name: bean for bean in beans}
    for vendor_bean in _vendor_beans(_parse(vendor)):
        name = _child_text(vendor_bean, "ejb-name")
        bean = by_name.get(name or "")
        if bean is None:
            continue
        bean.iiop = (_child_text(vendor_bean, "iiop") or "").lower() == "true"
        cmp = _child(vendor_bean, "cmp")
        if cmp is not None:
            bean.cmp_descriptors.extend(
                text for text in _children_text(cmp, "mapping-properties") if text
            )

    return DescriptorInfo(display_name=display_name, beans=beans)


def _bean_from_element(element: ET.Element, kind: str, source: Path) -> EnterpriseBean:
    name = _child_text(element, "ejb-name")
    home = _child_text(element, "home")
    remote = _child_text(element, "remote")
    implementation = _child_text(element, "ejb-class")
    if not name or not home or not remote or not implementation:
        raise GenerationError(
            f"Bean {name or '<unnamed>'} in {source} must declare home, remote and ejb-class",
            path=source,
        )
    primary_key = _child_text(element, "prim-key-class")
    return EnterpriseBean(
        name=name,
        kind=kind,
        home=ClassName(home),
        remote=ClassName(remote),
        implementation=ClassName(implementation),
        primary_key=ClassName(primary_key) if primary_key else None,
        session_type=_child_text(element, "session-type"),
        persistence_type=_child_text(element, "persistence-type"),
    )


def _vendor_beans(root: ET.Element) -> Iterator[ET.Element]:
    enterprise_beans = _child(root, "enterprise-beans")
    if enterprise_beans is None:
        return
    for element in enterprise_beans:
        if _local_name(element.tag) == "ejb":
            yield element


def _parse(path: Path) -> ET.Element:
    try:
        return ET.parse(path).getroot()
    except (ET.ParseError, OSError) as exc:
        raise GenerationError(f"Unable to read descriptor {path}: {exc}", path=path) from exc


def _local_name(tag: object) -> str:
    # Comments and processing instructions have non-string tags.
    if not isinstance(tag, str):
        return ""
    return tag.rsplit("}", 1)[-1]


def _child(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _child_text(element: ET.Element, name: str) -> Optional[str]:
    child = _child(element, name)
    if child is None or child.text is None:
        return None
    return child.text.strip() or None


def _children_text(element: ET.Element, name: str) -> Iterator[str]:
    for child in element:
        if _local_name(child.tag) == name and child.text:
            yield child.text.strip()


__all__ = ["ClassName", "DescriptorInfo", "EnterpriseBean", "read_descriptors"]
