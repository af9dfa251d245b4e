import logging

import pytest

from blink_invoice.core.auth import read_profile_key, resolve_credential
from blink_invoice.core.config import DEFAULT_API_URL, Settings
from blink_invoice.core.errors import ConfigurationError


def test_explicit_key_is_used_verbatim(tmp_path):
    profile = tmp_path / ".profile"
    profile.write_text("export BLINK_API_KEY=blink_fromprofile\n")
    settings = Settings(api_key="blink_explicit", profile_path=profile)

    assert resolve_credential(settings) == "blink_explicit"


@pytest.mark.parametrize("line", [
    "export BLINK_API_KEY=blink_abc123",
    'export BLINK_API_KEY="blink_abc123"',
    "BLINK_API_KEY='blink_abc123'",
])
def test_falls_back_to_profile_assignment(tmp_path, line):
    profile = tmp_path / ".profile"
    profile.write_text(f"# shell profile\nexport PATH=$PATH:/opt/bin\n{line}\n")
    settings = Settings(api_key=None, profile_path=profile)

    assert resolve_credential(settings) == "blink_abc123"


def test_empty_explicit_key_falls_back_to_profile(tmp_path):
    profile = tmp_path / ".profile"
    profile.write_text("BLINK_API_KEY=blink_fallback\n")

    assert resolve_credential(Settings(api_key="", profile_path=profile)) == "blink_fallback"


def test_missing_profile_names_both_sources(tmp_path):
    settings = Settings(profile_path=tmp_path / "nope" / ".profile")

    with pytest.raises(ConfigurationError) as exc:
        resolve_credential(settings)
    assert "BLINK_API_KEY" in str(exc.value)
    assert str(settings.profile_path) in str(exc.value)


def test_unreadable_profile_is_treated_as_no_match(tmp_path):
    # a directory can't be read as text
    assert read_profile_key(Settings(profile_path=tmp_path)) is None
    with pytest.raises(ConfigurationError):
        resolve_credential(Settings(profile_path=tmp_path))


def test_profile_without_assignment(tmp_path):
    profile = tmp_path / ".profile"
    profile.write_text("export OTHER_KEY=value\n")

    with pytest.raises(ConfigurationError):
        resolve_credential(Settings(profile_path=profile))


def test_malformed_key_is_rejected(tmp_path):
    settings = Settings(api_key="blink key with spaces", profile_path=tmp_path / ".profile")

    with pytest.raises(ConfigurationError, match="malformed"):
        resolve_credential(settings)


def test_unprefixed_key_only_warns(tmp_path, caplog):
    settings = Settings(api_key="legacykey42", profile_path=tmp_path / ".profile")

    with caplog.at_level(logging.WARNING):
        assert resolve_credential(settings) == "legacykey42"
    assert "does not start with 'blink_'" in caplog.text
    assert "legacykey42" not in caplog.text


def test_not_cached_between_calls(tmp_path):
    profile = tmp_path / ".profile"
    profile.write_text("BLINK_API_KEY=blink_first\n")
    settings = Settings(profile_path=profile)
    assert resolve_credential(settings) == "blink_first"

    profile.write_text("BLINK_API_KEY=blink_second\n")
    assert resolve_credential(settings) == "blink_second"


def test_settings_from_env():
    settings = Settings.from_env({
        "BLINK_API_KEY": "blink_env",
        "BLINK_API_URL": "https://staging.example/graphql",
        "BLINK_PROFILE_PATH": "/tmp/profile",
        "BLINK_TIMEOUT": "2.5",
    })

    assert settings.api_key == "blink_env"
    assert settings.api_url == "https://staging.example/graphql"
    assert str(settings.profile_path) == "/tmp/profile"
    assert settings.timeout == 2.5


def test_settings_defaults():
    settings = Settings.from_env({})

    assert settings.api_key is None
    assert settings.api_url == DEFAULT_API_URL
    assert settings.timeout is None


def test_bad_timeout_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        Settings.from_env({"BLINK_TIMEOUT": "soon"})


def test_override_ignores_none():
    settings = Settings(api_key="blink_a").override(api_key=None, api_url="https://x.example")

    assert settings.api_key == "blink_a"
    assert settings.api_url == "https://x.example"


@pytest.mark.parametrize("value", ["0", "-1", "nan", "inf"])
def test_non_positive_or_non_finite_timeout_rejected(value):
    with pytest.raises(ConfigurationError):
        Settings.from_env({"BLINK_TIMEOUT": value})


@pytest.mark.parametrize("value", [0, -2.5, float("inf")])
def test_override_rejects_bad_timeout(value):
    with pytest.raises(ConfigurationError):
        Settings().override(timeout=value)
