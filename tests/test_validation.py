"""Tests for configuration precondition checks."""

from __future__ import annotations

import pytest

from ejbpack.errors import ConfigurationError
from ejbpack.models import Descriptor
from ejbpack.validation import validate_configuration
from tests._fixtures.descriptor_tree import DescriptorTree


def test_bare_descriptor_requires_base_jar_name(tree: DescriptorTree) -> None:
    tree.write_descriptor("ejb-jar.xml")
    tree.write_descriptor("vendor-ejb-jar.xml")
    descriptor = Descriptor("ejb-jar.xml", root=tree.descriptor_dir)

    with pytest.raises(ConfigurationError) as excinfo:
        validate_configuration(descriptor, tree.config())

    assert excinfo.value.check == "archive-name"
    assert excinfo.value.phase == "configuration"


def test_bare_descriptor_accepted_with_base_jar_name(tree: DescriptorTree) -> None:
    tree.write_descriptor("ejb-jar.xml")
    tree.write_descriptor("vendor-ejb-jar.xml")
    descriptor = Descriptor("ejb-jar.xml", root=tree.descriptor_dir)

    validate_configuration(descriptor, tree.config(base_jar_name="bank"))


def test_missing_vendor_descriptor_reports_resolved_path(tree: DescriptorTree) -> None:
    tree.write_descriptor("beans/account-ejb-jar.xml")
    descriptor = Descriptor("beans/account-ejb-jar.xml", root=tree.descriptor_dir)

    with pytest.raises(ConfigurationError) as excinfo:
        validate_configuration(descriptor, tree.config())

    expected = (tree.descriptor_dir / "beans" / "account-vendor-ejb-jar.xml").resolve()
    assert excinfo.value.check == "vendor-descriptor"
    assert excinfo.value.path == expected
    assert str(expected) in str(excinfo.value)


def test_vendor_descriptor_must_be_a_file(tree: DescriptorTree) -> None:
    tree.write_descriptor("account-ejb-jar.xml")
    (tree.descriptor_dir / "account-vendor-ejb-jar.xml").mkdir()
    descriptor = Descriptor("account-ejb-jar.xml", root=tree.descriptor_dir)

    with pytest.raises(ConfigurationError) as excinfo:
        validate_configuration(descriptor, tree.config())

    assert excinfo.value.check == "vendor-descriptor"


def test_ias_home_must_be_directory(tree: DescriptorTree) -> None:
    tree.write_descriptor("account-ejb-jar.xml")
    tree.write_descriptor("account-vendor-ejb-jar.xml")
    descriptor = Descriptor("account-ejb-jar.xml", root=tree.descriptor_dir)

    with pytest.raises(ConfigurationError) as excinfo:
        validate_configuration(descriptor, tree.config(ias_home=tree.root / "nowhere"))

    assert excinfo.value.check == "ias-home"

    (tree.root / "ias").mkdir()
    validate_configuration(descriptor, tree.config(ias_home=tree.root / "ias"))


def test_archive_name_is_checked_before_vendor_descriptor(tree: DescriptorTree) -> None:
    descriptor = Descriptor("ejb-jar.xml", root=tree.descriptor_dir)

    with pytest.raises(ConfigurationError) as excinfo:
        validate_configuration(descriptor, tree.config(ias_home=tree.root / "nowhere"))

    assert excinfo.value.check == "archive-name"
