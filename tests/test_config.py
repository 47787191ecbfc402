"""Tests for ndvector configuration."""
import pytest

from ndvector import Vector
from ndvector.config import (
    DEFAULT_CONFIG,
    VECTOR_CONFIG,
    configure,
    get_setting,
    load_config,
    reset_config,
    validate_config,
)


@pytest.fixture(autouse=True)
def restore_defaults():
    yield
    reset_config()


class TestGetSetting:

    def test_dot_path(self):
        assert get_setting('comparison.atol') == 1e-15
        assert get_setting('display.precision') == 6

    def test_section(self):
        assert get_setting('comparison') == {'rtol': 0.0, 'atol': 1e-15}

    def test_missing_default(self):
        assert get_setting('comparison.nonexistent') is None
        assert get_setting('nope.nope', 3) == 3

    def test_section_is_a_copy(self):
        section = get_setting('comparison')
        section['atol'] = -1
        assert get_setting('comparison.atol') == 1e-15
        assert validate_config() == []


class TestLoadConfig:

    def test_merges_over_defaults(self, tmp_path):
        path = tmp_path / 'ndvector.yaml'
        path.write_text("comparison:\n  atol: 1.0e-9\n")
        config = load_config(path)
        assert config['comparison']['atol'] == 1e-9
        assert config['comparison']['rtol'] == 0.0
        assert config['display'] == DEFAULT_CONFIG['display']

    def test_not_applied_by_default(self, tmp_path):
        path = tmp_path / 'ndvector.yaml'
        path.write_text("comparison:\n  atol: 1.0e-9\n")
        load_config(path)
        assert get_setting('comparison.atol') == 1e-15

    def test_apply(self, tmp_path):
        path = tmp_path / 'ndvector.yaml'
        path.write_text("display:\n  precision: 2\n")
        load_config(path, apply=True)
        assert get_setting('display.precision') == 2
        assert repr(Vector.of(1.23456, 2)) == 'Vector([1.2, 2])'

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(path) == DEFAULT_CONFIG

    def test_unknown_setting(self, tmp_path):
        path = tmp_path / 'typo.yaml'
        path.write_text("display:\n  precison: 3\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_unknown_section(self, tmp_path):
        path = tmp_path / 'bad.yaml'
        path.write_text("broadcasting:\n  enabled: true\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / 'list.yaml'
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_values(self, tmp_path):
        path = tmp_path / 'neg.yaml'
        path.write_text("comparison:\n  atol: -1.0\n")
        with pytest.raises(ValueError):
            load_config(path)


class TestConfigure:

    def test_override(self):
        configure(comparison={'atol': 1e-6})
        assert get_setting('comparison.atol') == 1e-6
        assert get_setting('comparison.rtol') == 0.0

    def test_reset(self):
        configure(display={'max_components': 3})
        reset_config()
        assert VECTOR_CONFIG == DEFAULT_CONFIG

    def test_rejects_invalid(self):
        with pytest.raises(ValueError):
            configure(display={'precision': 0})
        assert get_setting('display.precision') == 6

    def test_rejects_unknown_setting(self):
        with pytest.raises(ValueError) as exc:
            configure(comparison={'atl': 1e-3})
        assert 'Available' in str(exc.value)
        assert 'atl' not in VECTOR_CONFIG['comparison']

    def test_returns_copy(self):
        active = configure(comparison={'atol': 1e-6})
        active['comparison']['atol'] = -1
        assert get_setting('comparison.atol') == 1e-6


class TestValidateConfig:

    def test_defaults_valid(self):
        assert validate_config() == []

    def test_reports_each_problem(self):
        config = {
            'comparison': {'rtol': -0.1, 'atol': 'tiny'},
            'display': {'precision': 6, 'max_components': 0},
        }
        errors = validate_config(config)
        assert len(errors) == 3
