import io
import json

from pathlib import Path

from ts_scan_reuse.model import ScannerDetails, ScanResult, dump_results, load_results


def test_load_results_list(results_file: Path, stored_results: list):
    assert load_results(results_file) == stored_results


def test_load_single_result(tmp_path: Path):
    path = tmp_path / 'result.json'
    path.write_text(json.dumps({
        'scanner': {'name': 'ScanCode', 'version': '3.2.1'},
        'source': 'pkg:cargo/serde@1.0.0'
    }))

    results = load_results(path)

    assert len(results) == 1
    assert results[0].scanner == ScannerDetails('ScanCode', '3.2.1', '')
    assert results[0].id is None
    assert results[0].summary == {}


def test_dump_results_omits_missing_id():
    output = io.StringIO()
    dump_results([ScanResult(scanner=ScannerDetails('ScanCode', '3.2.1', 'x'),
                             summary={'licenses': ['MIT']})], output)

    data = json.loads(output.getvalue())

    assert data == [{
        'scanner': {'name': 'ScanCode', 'version': '3.2.1', 'configuration': 'x'},
        'source': '',
        'summary': {'licenses': ['MIT']}
    }]
