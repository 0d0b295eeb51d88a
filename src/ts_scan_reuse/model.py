import json
import typing as t

from pathlib import Path

from dataclasses import dataclass, field
from dataclasses_json import config, dataclass_json
from typing_extensions import TextIO


@dataclass_json
@dataclass(frozen=True)
class ScannerDetails:
    name: str
    version: str
    configuration: str = ''


@dataclass_json
@dataclass
class ScanResult:
    scanner: ScannerDetails
    source: str = ''

    id: t.Optional[str] = field(default=None, metadata=config(exclude=lambda v: v is None))

    summary: t.Dict[str, t.Any] = field(default_factory=lambda: {})


def dump_results(results: t.List[ScanResult], fp: TextIO):
    # noinspection PyProtectedMember
    from dataclasses_json.core import _ExtendedEncoder

    # noinspection PyUnresolvedReferences
    data = [r.to_dict() for r in results]
    # noinspection PyTypeChecker
    json.dump(data, fp, cls=_ExtendedEncoder, indent=2)


def load_results(path: Path) -> t.List[ScanResult]:
    with path.open('r') as fp:
        data = json.load(fp)

    if type(data) is list:
        # noinspection PyUnresolvedReferences
        return [ScanResult.from_dict(d) for d in data]
    else:
        # noinspection PyUnresolvedReferences
        return [ScanResult.from_dict(data)]
