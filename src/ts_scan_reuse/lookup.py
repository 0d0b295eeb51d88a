import typing as t

from .cli import msg
from .model import ScannerDetails, ScanResult
from .criteria import ScannerCriteria


def criteria_for_scanner(details: ScannerDetails,
                         config: t.Optional[t.Mapping[str, t.Mapping[str, t.Any]]] = None) -> ScannerCriteria:
    """
    Creates the criteria for a scanner using the options configured for its name.
    :param details: Details of the scanner that is about to run
    :param config: Criteria options per scanner name, e.g. {'ScanCode': {'minVersion': '3'}}
    :return: ScannerCriteria
    """
    options = (config or {}).get(details.name, {})

    # TOML yields numbers for unquoted values like 'maxVersion = 4'
    options = {k: str(v) for k, v in options.items() if v is not None}

    return ScannerCriteria.create(details, options)


def filter_results(criteria: ScannerCriteria,
                   results: t.Iterable[ScanResult],
                   verbose=False) -> t.Iterator[ScanResult]:
    for res in results:
        if criteria.matches(res.scanner):
            yield res
        elif verbose:
            msg.info(f"Skipping result{_result_label(res)} produced by "
                     f"{res.scanner.name} {res.scanner.version}")


def _result_label(res: ScanResult) -> str:
    if res.id:
        return f" '{res.id}'"
    elif res.source:
        return f" for '{res.source}'"
    else:
        return ''
