"""Unit tests for domain/shared/types.py and the UTC clock helper."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from pydantic import BaseModel, ValidationError

from discord_lavalink_bot.domain.shared.datetime_utils import utcnow
from discord_lavalink_bot.domain.shared.types import (
    CommandPrefixStr,
    DiscordSnowflake,
    DurationSeconds,
    NonEmptyStr,
    PortNumber,
    TrackTitleStr,
    VolumePercent,
)


def _model_for(annotation, field_name: str = "v"):
    """Dynamically create a Pydantic model with a single field of the given type."""
    return type("M", (BaseModel,), {"__annotations__": {field_name: annotation}})


# ── DiscordSnowflake ────────────────────────────────────────────────


class TestDiscordSnowflake:
    M = _model_for(DiscordSnowflake)

    def test_bounds(self):
        assert self.M(v=1).v == 1
        assert self.M(v=2**64 - 1).v == 2**64 - 1

    @pytest.mark.parametrize("value", [0, -1, 2**64])
    def test_out_of_range_rejected(self, value):
        with pytest.raises(ValidationError):
            self.M(v=value)


# ── VolumePercent ───────────────────────────────────────────────────


class TestVolumePercent:
    M = _model_for(VolumePercent)

    @pytest.mark.parametrize("value", [0, 50, 100])
    def test_allowed(self, value):
        assert self.M(v=value).v == value

    @pytest.mark.parametrize("value", [-1, 101])
    def test_rejected(self, value):
        with pytest.raises(ValidationError):
            self.M(v=value)


# ── PortNumber ──────────────────────────────────────────────────────


class TestPortNumber:
    M = _model_for(PortNumber)

    def test_string_port_coerced(self):
        assert self.M(v="13592").v == 13592

    @pytest.mark.parametrize("value", [0, 65536])
    def test_rejected(self, value):
        with pytest.raises(ValidationError):
            self.M(v=value)


# ── String constraints ──────────────────────────────────────────────


class TestStrings:
    def test_non_empty(self):
        M = _model_for(NonEmptyStr)
        assert M(v="x").v == "x"
        with pytest.raises(ValidationError):
            M(v="")

    def test_track_title_max(self):
        M = _model_for(TrackTitleStr)
        assert M(v="x" * 500).v == "x" * 500
        with pytest.raises(ValidationError):
            M(v="x" * 501)

    def test_command_prefix(self):
        M = _model_for(CommandPrefixStr)
        assert M(v="!").v == "!"
        with pytest.raises(ValidationError):
            M(v="toolong")


# ── DurationSeconds ─────────────────────────────────────────────────


class TestDurationSeconds:
    M = _model_for(DurationSeconds)

    def test_streams_report_zero(self):
        assert self.M(v=0).v == 0

    def test_long_tracks_allowed(self):
        assert self.M(v=36_000).v == 36_000

    def test_negative_rejected(self):
        with pytest.raises(ValidationError):
            self.M(v=-1)


def test_utcnow_is_aware():
    now = utcnow()

    assert isinstance(now, datetime)
    assert now.tzinfo == UTC
