"""
Reuse of stored scan results

Decides which previously stored scan results can stand in for running a
scanner again, based on the scanner's name, version and configuration.
"""

__version__ = '1.0.0'

from .model import (
    ScannerDetails,
    ScanResult,
    dump_results,
    load_results,
)

from .version import (
    CriteriaError,
    ParseError,
    normalize_version,
    parse_version,
    parse_optional_version,
)

from .criteria import (
    ScannerCriteria,
    InvalidCriteriaError,
    PROP_CRITERIA_NAME,
    PROP_CRITERIA_MIN_VERSION,
    PROP_CRITERIA_MAX_VERSION,
    PROP_CRITERIA_CONFIGURATION,
)

__all__ = [
    'ScannerDetails',
    'ScanResult',
    'dump_results',
    'load_results',
    'CriteriaError',
    'ParseError',
    'normalize_version',
    'parse_version',
    'parse_optional_version',
    'ScannerCriteria',
    'InvalidCriteriaError',
    'PROP_CRITERIA_NAME',
    'PROP_CRITERIA_MIN_VERSION',
    'PROP_CRITERIA_MAX_VERSION',
    'PROP_CRITERIA_CONFIGURATION',
]
