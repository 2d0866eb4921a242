"""Tests for tag derivation from the metrics prefix."""

import pytest

from profiler_reporter.errors import ConfigurationError
from profiler_reporter.tags import get_tags, validate_tag_mapping


class TestValidateTagMapping:
    def test_missing_mapping_is_valid(self):
        validate_tag_mapping(None, 'api.prod')

    def test_matching_segment_count(self):
        validate_tag_mapping('service.env', 'api.prod')

    @pytest.mark.parametrize(
        'tag_mapping, prefix',
        [('service', 'api.prod'), ('service.env.host', 'api.prod'), ('a.b', 'single')],
    )
    def test_segment_count_mismatch(self, tag_mapping, prefix):
        with pytest.raises(ConfigurationError, match='segment'):
            validate_tag_mapping(tag_mapping, prefix)


class TestGetTags:
    def test_no_mapping_gives_no_tags(self):
        assert get_tags(None, 'api.prod') == {}
        assert get_tags('', 'api.prod') == {}

    def test_positional_mapping(self):
        tags = get_tags('service.env', 'api.prod')

        assert tags == {'service': 'api', 'env': 'prod'}
        assert list(tags) == ['service', 'env']

    def test_skip_segment(self):
        assert get_tags('SKIP.env.host', 'profiler.prod.web01') == {
            'env': 'prod',
            'host': 'web01',
        }

    def test_mangle_turns_dashes_into_dots(self):
        tags = get_tags('service.host', 'api.web-01-example-com', mangle=True)

        assert tags == {'service': 'api', 'host': 'web.01.example.com'}

    def test_dashes_kept_without_mangle(self):
        assert get_tags('host', 'web-01') == {'host': 'web-01'}

    def test_mismatch_raises(self):
        with pytest.raises(ConfigurationError):
            get_tags('service', 'api.prod')
