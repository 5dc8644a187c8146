"""Tests for OPTICSConfig and YAML loading/saving."""

from __future__ import annotations

import dataclasses
import subprocess
import sys
from pathlib import Path

import pytest
import yaml

from optics_order.clustering.distance import manhattan_distance
from optics_order.engine.config.optics_config import (
    FRONTIER_MODES,
    OPTICSConfig,
    OPTICSRunConfig,
    ReportConfig,
    _build_from_dict,
    load_optics_config,
    save_optics_config,
)

REPO_ROOT = Path(__file__).resolve().parents[1]


class TestDefaultValues:

    def test_optics_defaults(self):
        c = OPTICSConfig()
        assert c.epsilon == 1.0
        assert c.min_pts == 1
        assert c.metric == "euclidean"
        assert c.frontier_mode == "live"

    def test_report_defaults(self):
        c = ReportConfig()
        assert c.bar_width == 40
        assert c.undefined_marker == "UNDEFINED"

    def test_run_defaults(self):
        c = OPTICSRunConfig()
        assert isinstance(c.optics, OPTICSConfig)
        assert isinstance(c.report, ReportConfig)
        assert c.verbose is False

    def test_frontier_modes(self):
        assert FRONTIER_MODES == ("live", "snapshot")


class TestReplace:

    def test_none_keeps_previous(self):
        c = OPTICSConfig(epsilon=5.0, min_pts=3)
        c2 = c.replace(epsilon=None, min_pts=None, metric=None)
        assert c2 == c

    def test_no_changes_returns_same_object(self):
        c = OPTICSConfig()
        assert c.replace() is c

    def test_zero_is_a_real_value(self):
        c = OPTICSConfig(epsilon=5.0).replace(epsilon=0)
        assert c.epsilon == 0

    def test_override_subset(self):
        c = OPTICSConfig(epsilon=5.0, min_pts=3).replace(min_pts=1)
        assert c.epsilon == 5.0
        assert c.min_pts == 1

    def test_callable_metric(self):
        c = OPTICSConfig().replace(metric=manhattan_distance)
        assert c.metric is manhattan_distance

    def test_original_untouched(self):
        c = OPTICSConfig(epsilon=5.0)
        c.replace(epsilon=2.0)
        assert c.epsilon == 5.0


class TestImmutability:

    def test_optics_config_frozen(self):
        c = OPTICSConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            c.epsilon = 2.0

    def test_run_config_mutable(self):
        """OPTICSRunConfig is NOT frozen -- fields can be changed at runtime."""
        c = OPTICSRunConfig()
        c.verbose = True
        c.report.bar_width = 10
        assert c.verbose is True
        assert c.report.bar_width == 10


class TestToDict:

    def test_nested_dict_structure(self):
        d = OPTICSRunConfig().to_dict()
        assert isinstance(d["optics"], dict)
        assert d["optics"]["epsilon"] == 1.0
        assert d["report"]["bar_width"] == 40
        assert d["verbose"] is False


class TestYAMLSaveLoad:

    def test_save_and_load(self, tmp_path):
        original = OPTICSRunConfig(
            optics=OPTICSConfig(epsilon=5.0, min_pts=2, metric="manhattan", frontier_mode="snapshot"),
            verbose=True,
        )
        original.report.bar_width = 20
        path = tmp_path / "cfg.yaml"
        save_optics_config(original, path)
        loaded = load_optics_config(path)
        assert loaded.optics == original.optics
        assert loaded.report.bar_width == 20
        assert loaded.verbose is True

    def test_load_nonexistent_raises(self):
        with pytest.raises(FileNotFoundError):
            load_optics_config("/nonexistent/path/cfg.yaml")

    def test_load_empty_yaml(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        cfg = load_optics_config(path)
        assert cfg.optics == OPTICSConfig()

    def test_nested_override(self, tmp_path):
        path = tmp_path / "nested.yaml"
        path.write_text(yaml.dump({"optics": {"epsilon": 5.0}}))
        cfg = load_optics_config(path)
        assert cfg.optics.epsilon == 5.0
        assert cfg.optics.min_pts == 1  # default preserved
        assert isinstance(cfg.optics, OPTICSConfig)

    def test_load_extra_keys_ignored(self, tmp_path):
        path = tmp_path / "extra.yaml"
        path.write_text(yaml.dump({"verbose": True, "unknown_field": "hello"}))
        cfg = load_optics_config(path)
        assert cfg.verbose is True
        assert not hasattr(cfg, "unknown_field")

    def test_save_creates_parent_dirs(self, tmp_path):
        path = tmp_path / "a" / "b" / "cfg.yaml"
        save_optics_config(OPTICSRunConfig(), path)
        assert path.exists()

    def test_save_callable_metric_rejected(self, tmp_path):
        cfg = OPTICSRunConfig(optics=OPTICSConfig(metric=manhattan_distance))
        with pytest.raises(ValueError, match="callable"):
            save_optics_config(cfg, tmp_path / "cfg.yaml")


class TestBuildFromDict:

    def test_none_input_returns_default(self):
        cfg = _build_from_dict(OPTICSRunConfig, None)
        assert isinstance(cfg, OPTICSRunConfig)

    def test_subconfig_from_dict(self):
        cfg = _build_from_dict(OPTICSConfig, {"epsilon": 0.5, "min_pts": 4})
        assert cfg.epsilon == 0.5
        assert cfg.min_pts == 4


class TestImportOrder:

    @pytest.mark.parametrize("first,second", [
        ("optics_order.engine.config.optics_config", "optics_order.clustering"),
        ("optics_order.clustering", "optics_order.engine.config.optics_config"),
        ("optics_order.engine.config", "optics_order.engine.pipeline"),
    ])
    def test_fresh_interpreter_imports(self, first, second):
        code = f"import {first}; import {second}"
        proc = subprocess.run(
            [sys.executable, "-c", code],
            cwd=REPO_ROOT, capture_output=True, text=True,
        )
        assert proc.returncode == 0, proc.stderr

    def test_metric_type_has_one_definition(self):
        from optics_order.engine.config import optics_config

        assert not hasattr(optics_config, "DistanceFunction")
