"""Derive point tags from the metrics prefix.

A tag mapping is a dot-delimited list of tag keys aligned with the segments
of the metrics prefix::

    get_tags('service.env', 'api.prod')  # {'service': 'api', 'env': 'prod'}

A ``SKIP`` key drops the segment at that position. With ``mangle`` enabled,
dashes inside a prefix segment become dots, so ``web-01-example-com`` is
tagged as ``web.01.example.com`` without adding a prefix segment.
"""

from profiler_reporter.errors import ConfigurationError

SEGMENT_SEPARATOR = '.'
SKIP_TAG = 'SKIP'
MANGLED_CHAR = '-'


def _segments(value: str) -> list[str]:
    return value.split(SEGMENT_SEPARATOR)


def validate_tag_mapping(tag_mapping: str | None, prefix: str) -> None:
    if tag_mapping is None:
        return
    mapping_count = len(_segments(tag_mapping))
    prefix_count = len(_segments(prefix))
    if mapping_count != prefix_count:
        raise ConfigurationError(
            f'Tag mapping {tag_mapping!r} has {mapping_count} segment(s) '
            f'but prefix {prefix!r} has {prefix_count}'
        )


def get_tags(
    tag_mapping: str | None, prefix: str, mangle: bool = False
) -> dict[str, str]:
    if not tag_mapping:
        return {}
    validate_tag_mapping(tag_mapping, prefix)

    tags: dict[str, str] = {}
    for key, value in zip(_segments(tag_mapping), _segments(prefix)):
        if key == SKIP_TAG:
            continue
        if mangle:
            value = value.replace(MANGLED_CHAR, SEGMENT_SEPARATOR)
        tags[key] = value
    return tags
