"""Tests for environment-derived settings."""

import pytest

from weighted_samplers import AliasSampler, PreconditionError, RandomSource, config


def test_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(config.SEED_ENV, raising=False)
    monkeypatch.delenv(config.TOLERANCE_ENV, raising=False)
    assert config.default_seed() is None
    assert config.default_tolerance() == config.DEFAULT_TOLERANCE


def test_seed_is_parsed(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.SEED_ENV, " 42 ")
    assert config.default_seed() == 42


def test_bad_seed_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.SEED_ENV, "forty-two")
    with pytest.raises(PreconditionError, match=config.SEED_ENV):
        config.default_seed()


@pytest.mark.parametrize("raw", ["abc", "-1", "inf", "nan"])
def test_bad_tolerance_rejected(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv(config.TOLERANCE_ENV, raw)
    with pytest.raises(PreconditionError, match=config.TOLERANCE_ENV):
        config.default_tolerance()


def test_alias_sampler_reads_configured_tolerance(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv(config.TOLERANCE_ENV, "1e-6")
    sampler = AliasSampler([1, 2], [1, 1], RandomSource(0))
    assert sampler.tolerance == 1e-6


def test_explicit_tolerance_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.TOLERANCE_ENV, "1e-6")
    sampler = AliasSampler([1, 2], [1, 1], RandomSource(0), tolerance=1e-3)
    assert sampler.tolerance == 1e-3
