import json
import pytest

from pathlib import Path

from ts_scan_reuse.model import ScannerDetails, ScanResult
from ts_scan_reuse.criteria import ScannerCriteria


@pytest.fixture
def scancode() -> ScannerDetails:
    return ScannerDetails(name='ScanCode', version='3.2.1', configuration='x')


@pytest.fixture
def scancode_criteria(scancode: ScannerDetails) -> ScannerCriteria:
    return ScannerCriteria.create(scancode)


@pytest.fixture
def stored_results() -> list:
    return [
        ScanResult(scanner=ScannerDetails('ScanCode', '3.2.1', 'x'), source='pkg:pypi/requests@2.32.3', id='r1'),
        ScanResult(scanner=ScannerDetails('ScanCode', '3.2.9', 'x'), source='pkg:pypi/click@8.1.3', id='r2'),
        ScanResult(scanner=ScannerDetails('ScanCode', '3.3.0', 'x'), source='pkg:pypi/toml@0.10.2', id='r3'),
        ScanResult(scanner=ScannerDetails('ScanCode', '3.2', 'x'), source='pkg:pypi/wasabi@1.1.3', id='r4'),
        ScanResult(scanner=ScannerDetails('ScanCode', '3.2.5', 'y'), source='pkg:npm/left-pad@1.3.0', id='r5'),
        ScanResult(scanner=ScannerDetails('Licensee', '3.2.5', 'x'), source='pkg:npm/lodash@4.17.21'),
    ]


@pytest.fixture
def results_file(tmp_path: Path, stored_results: list) -> Path:
    path = tmp_path / 'results.json'
    with path.open('w') as fp:
        # noinspection PyUnresolvedReferences
        json.dump([r.to_dict() for r in stored_results], fp)
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / 'config'
    path.write_text('[default]\n'
                    '\n'
                    '[default.criteria.ScanCode]\n'
                    'maxVersion = "3.4"\n'
                    '\n'
                    '[strict]\n')
    return path
