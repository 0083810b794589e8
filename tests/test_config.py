"""Tests for target folder configuration."""

from __future__ import annotations

from rc_dependencies.config import DEFAULT_TARGETS, ENV_VAR, TargetNames


class TestTargetNames:
    def test_defaults_when_unset(self):
        targets = TargetNames.from_env({})
        assert targets.names == ("node_modules", ".venv", "venv", ".git")
        assert targets.names == DEFAULT_TARGETS

    def test_env_override_is_trimmed(self):
        targets = TargetNames.from_env({ENV_VAR: "  build ,  dist  "})
        assert targets.names == ("build", "dist")

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(ENV_VAR, "target,.tox")
        assert list(TargetNames.from_env()) == ["target", ".tox"]

    def test_blank_items_dropped(self):
        assert TargetNames.parse("a,, b ,").names == ("a", "b")

    def test_empty_value_matches_nothing(self):
        targets = TargetNames.from_env({ENV_VAR: ""})
        assert len(targets) == 0
        assert "node_modules" not in targets

    def test_membership_is_exact(self):
        targets = TargetNames(("node_modules",))
        assert "node_modules" in targets
        assert "Node_Modules" not in targets
        assert "node_modules2" not in targets
        assert "node_*" not in targets
