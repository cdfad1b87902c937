import pytest

from rtdetect.schemas import DEFAULTS, get_by_prefix, validate_config


class TestValidateConfig:
    def test_defaults(self):
        assert DEFAULTS['detect.maxgap'] == 100
        assert DEFAULTS['detect.minscore'] == 0.4
        assert DEFAULTS['detect.canonical_chromosomes'] == 24
        assert DEFAULTS['reference.annotations'] == []

    def test_defaults_immutable(self):
        with pytest.raises(TypeError):
            DEFAULTS['detect.maxgap'] = 10

    def test_fill_defaults(self):
        config = validate_config({'detect.maxgap': 30})
        assert config['detect.maxgap'] == 30
        assert config['detect.minscore'] == 0.4

    @pytest.mark.parametrize(
        'config',
        [
            {'detect.maxgap': -1},
            {'detect.minscore': 1.5},
            {'detect.canonical_chromosomes': 30},
            {'detect.unknown_setting': 1},
        ],
    )
    def test_invalid(self, config):
        with pytest.raises(AssertionError):
            validate_config(config)

    def test_get_by_prefix(self):
        settings = get_by_prefix(dict(DEFAULTS), 'detect.')
        assert settings == {'maxgap': 100, 'minscore': 0.4, 'canonical_chromosomes': 24}
