from __future__ import annotations

import io
import os
from pathlib import Path

import pytest
from pydantic import ValidationError
from rich.console import Console

from kubescaffold.core.resource import resolver
from kubescaffold.core.resource.groups import CORE_GROUPS
from kubescaffold.core.resource.models import Resource
from kubescaffold.core.resource.resolver import (
    FileStatus,
    file_status,
    get_resource_info,
    get_resource_info_for,
    resource_types_path,
)

REPO = "github.com/acme/proj"
DOMAIN = "acme.com"


def _write_types(root: Path, version: str, kind: str) -> Path:
    path = root / "api" / version / f"{kind.lower()}_types.go"
    path.parent.mkdir(parents=True)
    path.write_text("package " + version + "\n", encoding="utf-8")
    return path


def test_core_group_without_domain_uses_group_alone(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    res = Resource(group="apps", version="v1", kind="Deployment")

    assert get_resource_info(res, REPO, DOMAIN) == ("k8s.io/api/apps", "apps")


def test_core_group_with_domain_appends_table_value(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    res = Resource(group="networking", version="v1", kind="Ingress")

    assert get_resource_info(res, REPO, DOMAIN) == ("k8s.io/api/networking", "networking.k8s.io")


def test_dotted_core_group(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    res = Resource(group="rbac.authorization", version="v1", kind="Role")

    assert get_resource_info(res, REPO, DOMAIN) == (
        "k8s.io/api/rbac.authorization",
        "rbac.authorization.k8s.io",
    )


@pytest.mark.parametrize("group, suffix", sorted(CORE_GROUPS.items()))
def test_every_core_group_resolves_to_k8s_api(
    group: str, suffix: str, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    package, group_domain = get_resource_info(Resource(group=group, version="v1", kind="Thing"), REPO, DOMAIN)

    assert package == "k8s.io/api/" + group
    assert group_domain == (f"{group}.{suffix}" if suffix else group)


def test_unknown_group_without_local_file_is_project_local(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    res = Resource(group="widgets", version="v1alpha1", kind="Widget")

    assert get_resource_info(res, REPO, DOMAIN) == ("github.com/acme/proj/api", "widgets.acme.com")


def test_unknown_group_with_local_file_is_project_local(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write_types(tmp_path, "v1alpha1", "Widget")
    res = Resource(group="widgets", version="v1alpha1", kind="Widget")

    assert get_resource_info(res, REPO, DOMAIN) == ("github.com/acme/proj/api", "widgets.acme.com")


def test_core_group_with_local_file_is_project_local(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write_types(tmp_path, "v1", "Deployment")
    res = Resource(group="apps", version="v1", kind="Deployment")

    assert get_resource_info(res, REPO, DOMAIN) == ("github.com/acme/proj/api", "apps.acme.com")


def test_stat_error_other_than_missing_counts_as_existing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(resolver, "file_status", lambda _path: FileStatus.ERROR)
    res = Resource(group="apps", version="v1", kind="Deployment")

    assert get_resource_info(res, REPO, DOMAIN) == ("github.com/acme/proj/api", "apps.acme.com")


def test_base_dir_is_used_instead_of_cwd(tmp_path: Path) -> None:
    _write_types(tmp_path, "v1", "Pod")
    res = Resource(group="core", version="v1", kind="Pod")

    assert get_resource_info(res, REPO, DOMAIN, base_dir=tmp_path) == ("github.com/acme/proj/api", "core.acme.com")
    assert get_resource_info(res, REPO, DOMAIN, base_dir=tmp_path / "other") == ("k8s.io/api/core", "core")


def test_resolution_is_idempotent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    res = Resource(group="batch", version="v1", kind="Job")

    assert get_resource_info(res, REPO, DOMAIN) == get_resource_info(res, REPO, DOMAIN)


def test_empty_fields_give_degenerate_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert get_resource_info(Resource(), REPO, DOMAIN) == ("github.com/acme/proj/api", ".acme.com")
    assert get_resource_info(Resource(group="widgets"), "", "") == ("api", "widgets.")


def test_flat_signature(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert get_resource_info_for("Pod", "v1", "core", REPO, DOMAIN) == ("k8s.io/api/core", "core")
    assert get_resource_info_for("Widget", "v1", "widgets", REPO, DOMAIN) == (
        "github.com/acme/proj/api",
        "widgets.acme.com",
    )


def test_resource_types_path_lowercases_kind() -> None:
    res = Resource(group="apps", version="v1beta2", kind="StatefulSet")

    assert resource_types_path(res) == Path("api", "v1beta2", "statefulset_types.go")
    assert resource_types_path(res, Path("/work")) == Path("/work/api/v1beta2/statefulset_types.go")


def test_file_status_tri_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    present = tmp_path / "present.go"
    present.write_text("", encoding="utf-8")

    assert file_status(present) is FileStatus.EXISTS
    assert file_status(tmp_path / "missing.go") is FileStatus.NOT_EXIST

    def denied(_path: object) -> None:
        raise PermissionError("denied")

    monkeypatch.setattr(os, "stat", denied)
    assert file_status(present) is FileStatus.ERROR


def test_core_groups_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        CORE_GROUPS["widgets"] = "acme.com"  # type: ignore[index]
    assert "widgets" not in CORE_GROUPS


def test_resource_is_immutable() -> None:
    res = Resource(group="apps", version="v1", kind="Deployment")

    with pytest.raises(ValidationError):
        res.kind = "StatefulSet"  # type: ignore[misc]


def test_console_reports_decision(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    out = io.StringIO()
    console = Console(file=out, width=200)

    get_resource_info(Resource(group="apps", version="v1", kind="Deployment"), REPO, DOMAIN, console=console)
    get_resource_info(Resource(group="widgets", version="v1", kind="Widget"), REPO, DOMAIN, console=console)

    text = out.getvalue()
    assert "k8s.io/api/apps" in text
    assert "paquete local" in text


def test_nul_byte_in_kind_falls_back_to_project_local(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    res = Resource(group="apps", version="v1", kind="De\x00ployment")

    assert file_status(resource_types_path(res)) is FileStatus.ERROR
    assert get_resource_info(res, "r", "d") == ("r/api", "apps.d")
