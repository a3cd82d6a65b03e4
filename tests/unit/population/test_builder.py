# tests/unit/population/test_builder.py

import pytest

import dustpop.population.builder as builder_mod
from dustpop import DustMix
from dustpop.population.builder import DustMixBuilder, build_dust_mix


def test_dust_mix_builder_missing_type_raises():
    """
    Configs without a 'type' key should raise a clear ValueError.
    """
    cfg = {}

    builder = DustMixBuilder(cfg)
    with pytest.raises(ValueError, match="type"):
        builder.build()

    with pytest.raises(ValueError, match="type"):
        build_dust_mix(cfg)


def test_dust_mix_builder_unknown_type_raises():
    with pytest.raises(ValueError, match="Unknown dust mix type"):
        build_dust_mix({"type": "this_type_does_not_exist"})


def test_dust_mix_builder_dispatches_to_weingartner_draine():
    cfg = {
        "type": "weingartner_draine",
        "environment": "MilkyWay",
        "N_graphite_sizes": 3,
        "N_silicate_sizes": 2,
        "N_PAH_sizes": 1,
    }

    mix = build_dust_mix(cfg)

    assert isinstance(mix, DustMix)
    assert mix.get_num_populations() == 3 + 2 + 1 + 1


def test_dust_mix_builder_uses_discovered_types(monkeypatch):
    captured = {}

    def fake_build(cfg):
        captured["cfg"] = cfg
        return "built"

    monkeypatch.setattr(builder_mod, "discover_dust_mix_types", lambda: {"fake": fake_build})

    cfg = {"type": "fake", "environment": "LMC"}
    assert build_dust_mix(cfg) == "built"
    assert captured["cfg"] == cfg
    # the builder works on a copy of the config
    assert captured["cfg"] is not cfg
