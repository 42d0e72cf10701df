"""Tests for the catalogue runner."""
import pytest
from catalogue import CATEGORIES, DEMOS, DEMO_SECTIONS, CatalogueRunner, category_of
from config import ConfigManager, ConfigPresets
from utils.exceptions import DemoError


@pytest.fixture
def config(tmp_path):
    data = ConfigPresets.quiet()
    data['factory']['log_file'] = str(tmp_path / "logs.txt")
    return ConfigManager(data)


class TestRegistry:
    """Tests for the demo registry."""

    def test_every_pattern_has_a_demo(self):
        assert len(DEMOS) == 20
        assert set(CATEGORIES['behavioral']) == {
            'chain_of_responsibility', 'command', 'memento', 'observer',
            'state', 'strategy', 'template', 'visitor',
        }
        assert set(CATEGORIES['creational']) == {
            'abstract_factory', 'builder', 'factory', 'prototype', 'singleton',
        }
        assert set(CATEGORIES['structural']) == {
            'adapter', 'bridge', 'composite', 'decorator', 'facade', 'flyweight', 'proxy',
        }

    def test_configured_demos_exist(self):
        assert set(DEMO_SECTIONS) <= set(DEMOS)

    def test_category_of(self):
        assert category_of('proxy') == 'structural'
        with pytest.raises(DemoError):
            category_of('interpreter')


class TestCatalogueRunner:
    """Tests for running demos."""

    def test_run_all(self, config, tmp_path, capsys):
        """Every demo runs and succeeds."""
        summary = CatalogueRunner(config).run()

        assert summary['total'] == 20
        assert summary['failed'] == []
        assert (tmp_path / "logs.txt").exists()
        assert "Behavioral: Observer" in capsys.readouterr().out

    def test_config_section_reaches_demo(self, tmp_path, capsys):
        """Chain limits from configuration change who approves."""
        data = ConfigPresets.quiet()
        data['chain'] = {'department_limit': 5000, 'finance_limit': 8000}

        CatalogueRunner(ConfigManager(data)).run(['chain_of_responsibility'])

        out = capsys.readouterr().out
        assert "Department Manager approved the purchase of Office Supplies." in out

    def test_failing_demo_is_recorded(self, config, monkeypatch, capsys):
        """A failing demo is reported and the rest still run."""
        def broken():
            raise RuntimeError("demo exploded")

        monkeypatch.setitem(DEMOS, 'command', broken)
        runner = CatalogueRunner(config)

        summary = runner.run(['command', 'template'])

        assert summary['failed'] == ['command']
        assert summary['succeeded'] == 1
        assert runner.results[0].error == "demo exploded"

    def test_unknown_demo_rejected_before_running(self, config, capsys):
        runner = CatalogueRunner(config)
        with pytest.raises(DemoError):
            runner.run(['observer', 'interpreter'])
        assert runner.results == []

    def test_list_demos(self):
        assert CatalogueRunner.list_demos('creational')[0] == 'abstract_factory'
        with pytest.raises(DemoError):
            CatalogueRunner.list_demos('concurrency')
