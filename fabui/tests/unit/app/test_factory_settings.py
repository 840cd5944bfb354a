from __future__ import annotations

import pytest

from fabui.app.settings import FactoryConfig


def test_defaults() -> None:
    config = FactoryConfig()
    assert config.to_dict() == {
        "track_instances": "weak",
        "track_limit": None,
        "strict_elements": True,
        "configure_logging": False,
    }


def test_from_env_reads_overrides() -> None:
    config = FactoryConfig.from_env(
        {
            "FABUI_TRACK_INSTANCES": " Strong ",
            "FABUI_TRACK_LIMIT": "50",
            "FABUI_STRICT_ELEMENTS": "off",
            "FABUI_CONFIGURE_LOGGING": "yes",
        }
    )
    assert config == FactoryConfig(
        track_instances="strong", track_limit=50, strict_elements=False, configure_logging=True
    )


def test_from_env_uses_process_environment(monkeypatch) -> None:
    monkeypatch.setenv("FABUI_TRACK_INSTANCES", "off")
    monkeypatch.delenv("FABUI_TRACK_LIMIT", raising=False)
    monkeypatch.delenv("FABUI_STRICT_ELEMENTS", raising=False)
    assert FactoryConfig.from_env().track_instances == "off"


def test_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unsupported settings keys"):
        FactoryConfig.from_mapping({"track_instances": "weak", "colour": "red"})


@pytest.mark.parametrize(
    "payload",
    [
        {"track_instances": "sometimes"},
        {"track_limit": "many"},
        {"track_limit": 0},
        {"track_limit": True},
        {"track_limit": [1]},
    ],
)
def test_invalid_values_raise(payload) -> None:
    with pytest.raises(ValueError):
        FactoryConfig.from_mapping(payload)


def test_apply_returns_new_config() -> None:
    base = FactoryConfig()
    updated = base.apply({"track_limit": "", "strict_elements": 0})
    assert updated.track_limit is None
    assert updated.strict_elements is False
    assert base.strict_elements is True
