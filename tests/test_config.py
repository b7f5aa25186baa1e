"""Tests for configuration inheritance and loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from mailer_core.config import (
    default_config_path,
    load_config,
    mail_services_from,
    merge_config,
    resolve_config,
)
from mailer_core.errors import CircularInheritanceError, ConfigurationError


def test_deep_merge_is_override_biased() -> None:
    services = {
        "ancestor": {"a": {"x": 1, "y": 2}, "b": 1},
        "child": {"a": {"y": 3}, "extends": "ancestor"},
    }

    assert resolve_config(services, "child") == {"a": {"x": 1, "y": 3}, "b": 1}


def test_lists_are_replaced_not_concatenated() -> None:
    merged = merge_config({"mail_listeners": ["a", "b"]}, {"mail_listeners": ["c"]})
    assert merged == {"mail_listeners": ["c"]}


def test_merge_does_not_mutate_inputs() -> None:
    base = {"transport_options": {"host": "a"}}
    override = {"transport_options": {"port": 25}}
    merge_config(base, override)
    assert base == {"transport_options": {"host": "a"}}
    assert override == {"transport_options": {"port": 25}}


def test_entry_without_extends_is_returned_as_copy() -> None:
    services = {"basic": {"transport": "smtp", "transport_options": {"host": "x"}}}
    resolved = resolve_config(services, "basic")

    assert resolved == services["basic"]
    resolved["transport_options"]["host"] = "changed"
    assert services["basic"]["transport_options"]["host"] == "x"


def test_multi_level_chain_resolves_without_extends() -> None:
    services = {
        "root": {"transport": "sendmail", "renderer": "root_renderer", "level": "root"},
        "middle": {"extends": "root", "transport": "smtp", "level": "middle"},
        "leaf": {"extends": "middle", "level": "leaf"},
    }
    resolved = resolve_config(services, "leaf")

    assert resolved == {"transport": "smtp", "renderer": "root_renderer", "level": "leaf"}
    assert "extends" not in resolved


def test_end_to_end_inheritance() -> None:
    services = {
        "basic": {"transport": "smtp", "transport_options": {"host": "x"}},
        "derived": {"extends": "basic", "renderer": "tpl"},
    }
    assert resolve_config(services, "derived") == {
        "transport": "smtp",
        "transport_options": {"host": "x"},
        "renderer": "tpl",
    }


def test_self_extension_fails() -> None:
    with pytest.raises(CircularInheritanceError) as excinfo:
        resolve_config({"a": {"extends": "a"}}, "a")
    assert excinfo.value.name == "a"


def test_cycle_fails() -> None:
    services = {"a": {"extends": "b"}, "b": {"extends": "a"}}
    with pytest.raises(CircularInheritanceError) as excinfo:
        resolve_config(services, "a")
    assert excinfo.value.chain == ("a", "b")


def test_cycle_not_involving_the_requested_entry_fails() -> None:
    services = {"a": {"extends": "b"}, "b": {"extends": "c"}, "c": {"extends": "b"}}
    with pytest.raises(CircularInheritanceError):
        resolve_config(services, "a")


def test_missing_ancestor_fails() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_config({"a": {"extends": "nope"}}, "a")
    assert not isinstance(excinfo.value, CircularInheritanceError)
    assert excinfo.value.name == "nope"


def test_missing_entry_fails() -> None:
    with pytest.raises(ConfigurationError):
        resolve_config({}, "ghost")


def test_non_mapping_entry_fails() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_config({"a": "smtp"}, "a")
    assert excinfo.value.name == "a"


@pytest.mark.parametrize("parent", [["b"], {"name": "b"}, 7])
def test_extends_must_be_a_service_name(parent: object) -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        resolve_config({"a": {"extends": parent}, "b": {}}, "a")
    assert not isinstance(excinfo.value, CircularInheritanceError)
    assert excinfo.value.name == "a"


def test_load_yaml_config(tmp_path: Path) -> None:
    config_file = tmp_path / "mailer.yml"
    config_file.write_text(
        "mailer_options:\n"
        "  mail_services:\n"
        "    default:\n"
        "      transport: smtp\n"
        "      transport_options:\n"
        "        host: mail.example.com\n"
    )
    config = load_config(config_file)

    services = mail_services_from(config)
    assert services["default"]["transport_options"] == {"host": "mail.example.com"}


def test_load_toml_config(tmp_path: Path) -> None:
    config_file = tmp_path / "mailer.toml"
    config_file.write_text(
        "[mailer_options.mail_services.default]\n"
        "transport = \"file\"\n"
    )
    assert mail_services_from(load_config(config_file)) == {"default": {"transport": "file"}}


def test_missing_config_file_is_empty(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.yml") == {}
    assert mail_services_from({}) == {}


def test_invalid_config_documents_fail(tmp_path: Path) -> None:
    broken = tmp_path / "broken.yml"
    broken.write_text("mailer_options: [unclosed\n")
    with pytest.raises(ConfigurationError):
        load_config(broken)

    scalar = tmp_path / "scalar.yml"
    scalar.write_text("just a string\n")
    with pytest.raises(ConfigurationError):
        load_config(scalar)

    unknown = tmp_path / "mailer.ini"
    unknown.write_text("[x]\n")
    with pytest.raises(ConfigurationError):
        load_config(unknown)


def test_mail_services_section_must_be_mapping() -> None:
    with pytest.raises(ConfigurationError):
        mail_services_from({"mailer_options": {"mail_services": ["default"]}})


def test_default_config_path_honors_env(tmp_path: Path) -> None:
    override = tmp_path / "custom.yml"
    assert default_config_path({"MAILER_CONFIG": str(override)}) == override
    assert default_config_path({}).name == "mailer.yml"
