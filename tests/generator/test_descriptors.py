"""Tests for descriptor reading."""

from __future__ import annotations

from pathlib import Path

import pytest

from ejbpack.errors import GenerationError
from ejbpack.generator.descriptors import ClassName, read_descriptors

STANDARD = """\
<?xml version="1.0"?>
<!DOCTYPE ejb-jar PUBLIC "-//Sun Microsystems, Inc.//DTD Enterprise JavaBeans 2.0//EN"
  "http://java.sun.com/dtd/ejb-jar_2_0.dtd">
<ejb-jar>
  <display-name>Bank</display-name>
  <enterprise-beans>
    <session>
      <ejb-name>Teller</ejb-name>
      <home>com.bank.TellerHome</home>
      <remote>com.bank.Teller</remote>
      <ejb-class>com.bank.impl.TellerEJB</ejb-class>
      <session-type>Stateful</session-type>
    </session>
    <entity>
      <ejb-name>Account</ejb-name>
      <home>com.bank.AccountHome</home>
      <remote>com.bank.Account</remote>
      <ejb-class>com.bank.impl.AccountEJB</ejb-class>
      <persistence-type>Container</persistence-type>
      <prim-key-class>java.lang.String</prim-key-class>
    </entity>
    <message-driven>
      <ejb-name>Audit</ejb-name>
      <ejb-class>com.bank.AuditMDB</ejb-class>
    </message-driven>
  </enterprise-beans>
</ejb-jar>
"""

VENDOR = """\
<?xml version="1.0"?>
<ias-ejb-jar>
  <enterprise-beans>
    <ejb>
      <ejb-name>Teller</ejb-name>
      <iiop>true</iiop>
    </ejb>
    <ejb>
      <ejb-name>Account</ejb-name>
      <iiop>false</iiop>
      <cmp>
        <mapping-properties>META-INF/Account-ias-cmp.xml</mapping-properties>
      </cmp>
    </ejb>
  </enterprise-beans>
</ias-ejb-jar>
"""


def _write(tmp_path: Path, standard: str = STANDARD, vendor: str = VENDOR) -> tuple[Path, Path]:
    std_path = tmp_path / "bank-ejb-jar.xml"
    vendor_path = tmp_path / "bank-vendor-ejb-jar.xml"
    std_path.write_text(standard, encoding="utf-8")
    vendor_path.write_text(vendor, encoding="utf-8")
    return std_path, vendor_path


def test_read_descriptors_merges_vendor_settings(tmp_path: Path) -> None:
    info = read_descriptors(*_write(tmp_path))

    assert info.display_name == "Bank"
    assert [bean.name for bean in info.beans] == ["Teller", "Account"]

    teller, account = info.beans
    assert teller.kind == "session"
    assert teller.session_type == "Stateful"
    assert teller.iiop is True
    assert account.is_cmp is True
    assert account.iiop is False
    assert info.cmp_descriptors == ("META-INF/Account-ias-cmp.xml",)


def test_system_primary_key_is_not_packaged(tmp_path: Path) -> None:
    info = read_descriptors(*_write(tmp_path))
    account = info.beans[1]

    assert [name.qualified for name in account.bean_classes()] == [
        "com.bank.AccountHome",
        "com.bank.Account",
        "com.bank.impl.AccountEJB",
    ]


def test_generated_class_names(tmp_path: Path) -> None:
    teller = read_descriptors(*_write(tmp_path)).beans[0]
    names = [name.qualified for name in teller.generated_classes()]

    assert names[:3] == [
        "com.bank.impl.ejb_fac_com_bank_impl_TellerEJB",
        "com.bank.impl.ejb_home_com_bank_impl_TellerEJB",
        "com.bank.impl.ejb_skel_com_bank_impl_TellerEJB",
    ]
    assert "com.bank.ejb_kcp_stub_Teller" in names
    assert "org.omg.stub.com.bank._TellerHome_Stub" in names
    assert len(names) == 11


def test_class_name_helpers() -> None:
    name = ClassName("com.bank.Teller")
    assert name.package == "com.bank."
    assert name.simple == "Teller"
    assert name.class_file == "com/bank/Teller.class"
    assert ClassName("Teller").package == ""


def test_namespaced_descriptors_are_supported(tmp_path: Path) -> None:
    standard = STANDARD.replace("<ejb-jar>", '<ejb-jar xmlns="http://java.sun.com/xml/ns/j2ee">')
    info = read_descriptors(*_write(tmp_path, standard=standard))

    assert info.display_name == "Bank"
    assert len(info.beans) == 2


def test_malformed_descriptor_raises_generation_error(tmp_path: Path) -> None:
    std_path, vendor_path = _write(tmp_path, standard="<ejb-jar>")

    with pytest.raises(GenerationError) as excinfo:
        read_descriptors(std_path, vendor_path)

    assert isinstance(excinfo.value.__cause__, Exception)
    assert excinfo.value.path == std_path


def test_incomplete_bean_raises_generation_error(tmp_path: Path) -> None:
    standard = STANDARD.replace("<home>com.bank.TellerHome</home>", "")

    with pytest.raises(GenerationError):
        read_descriptors(*_write(tmp_path, standard=standard))
