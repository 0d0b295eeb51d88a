# SPDX-FileCopyrightText: 2024 EACG GmbH
#
# SPDX-License-Identifier: Apache-2.0

import re
import typing as t

from dataclasses import dataclass, field
from semantic_version import Version

from .model import ScannerDetails
from .version import CriteriaError, ParseError, parse_version, parse_optional_version, next_minor


# Option keys which can be used to override the criteria derived from a scanner
PROP_CRITERIA_NAME = 'regScannerName'
PROP_CRITERIA_MIN_VERSION = 'minVersion'
PROP_CRITERIA_MAX_VERSION = 'maxVersion'
PROP_CRITERIA_CONFIGURATION = 'configuration'


class InvalidCriteriaError(CriteriaError, ValueError):
    pass


@dataclass(frozen=True)
class ScannerCriteria:
    """
    Defines which stored scan results may be reused instead of running a scanner.

    The criteria are matched against the details of the scanner which produced a
    stored result. By default they are created from the exact properties of the
    running scanner, but options can widen them, e.g. to accept results produced by
    an older scanner version or by a whole family of scanners.
    """

    # Regular expression, must match the whole scanner name
    name_pattern: str

    # Inclusive
    min_version: Version

    # Exclusive
    max_version: Version

    # None matches any configuration
    configuration: t.Optional[str] = None

    _name_regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.min_version >= self.max_version:
            raise InvalidCriteriaError(f'The maxVersion ({self.max_version}) is exclusive and must be '
                                       f'greater than the minVersion ({self.min_version}).')

        try:
            name_regex = re.compile(self.name_pattern)
        except re.error as err:
            raise ParseError(f"Invalid scanner name pattern '{self.name_pattern}': {err}") from err

        object.__setattr__(self, '_name_regex', name_regex)

    @staticmethod
    def create(details: ScannerDetails, options: t.Optional[t.Mapping[str, str]] = None) -> 'ScannerCriteria':
        """
        Creates criteria matching the given scanner details. Defaults can be overridden
        with the 'regScannerName', 'minVersion', 'maxVersion' and 'configuration' options,
        other keys are ignored. Without 'maxVersion', results up to the next minor
        version of 'minVersion' are accepted.
        :param details: Details of the scanner that is about to run
        :param options: Criteria overrides
        :return: ScannerCriteria
        """
        if options is None:
            options = {}

        scanner_version = parse_version(details.version)

        min_version = parse_optional_version(options.get(PROP_CRITERIA_MIN_VERSION))
        if min_version is None:
            min_version = scanner_version

        max_version = parse_optional_version(options.get(PROP_CRITERIA_MAX_VERSION))
        if max_version is None:
            max_version = next_minor(min_version)

        name_pattern = options.get(PROP_CRITERIA_NAME)
        if name_pattern is None:
            name_pattern = details.name

        configuration = options.get(PROP_CRITERIA_CONFIGURATION)
        if configuration is None:
            configuration = details.configuration

        return ScannerCriteria(name_pattern=name_pattern,
                               min_version=min_version,
                               max_version=max_version,
                               configuration=configuration)

    def matches(self, details: ScannerDetails) -> bool:
        # Stored results may hold incomplete or loosely versioned scanner details
        if not isinstance(details.name, str) or not isinstance(details.version, str):
            return False

        if not self._name_regex.fullmatch(details.name):
            return False

        try:
            version = Version(details.version)
        except ValueError:
            return False

        if not (self.min_version <= version < self.max_version):
            return False

        return self.configuration is None or self.configuration == details.configuration
