# SPDX-FileCopyrightText: 2024 EACG GmbH
#
# SPDX-License-Identifier: Apache-2.0

import typing as t

from semantic_version import Version


class CriteriaError(Exception):
    pass


class ParseError(CriteriaError, ValueError):
    pass


def normalize_version(raw: str) -> str:
    """
    Pads a partial version with '.0' segments until it has major, minor and patch
    parts, so that users can write "2" instead of "2.0.0". Segments that are
    already present are left untouched, even if they are not numeric.
    :param raw: A (possibly partial) version string
    :return: Version string with at least two '.' separators
    """
    while raw.count('.') < 2:
        raw += '.0'

    return raw


def parse_version(raw: str) -> Version:
    normalized = normalize_version(raw)

    try:
        return Version(normalized)
    except ValueError as err:
        raise ParseError(f"Invalid version '{raw}': {err}") from err


def parse_optional_version(raw: t.Optional[str]) -> t.Optional[Version]:
    return parse_version(raw) if raw is not None else None


def next_minor(version: Version) -> Version:
    # Pre-release and build parts are dropped: 1.2.3-rc.1 -> 1.3.0
    return Version(major=version.major, minor=version.minor + 1, patch=0)
