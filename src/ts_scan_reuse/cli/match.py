import sys
import click
import typing as t

from io import StringIO
from pathlib import Path

from . import cli, msg, load_results_from_file, parse_key_value_options
from ..model import ScannerDetails, ScanResult, dump_results
from ..version import CriteriaError
from ..lookup import criteria_for_scanner, filter_results


@cli.command('match', help='Selects stored scan results which can be reused instead of running a scanner')
@click.argument('path', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('-o', '--output', 'output_path',
              type=click.Path(path_type=Path),
              required=False,
              help='Output path for the reusable results')
@click.option('--scanner-name', 'scanner_name', type=str, required=True,
              help='Name of the scanner that is about to run')
@click.option('--scanner-version', 'scanner_version', type=str, required=True,
              help='Version of the scanner that is about to run')
@click.option('--scanner-configuration', 'scanner_configuration', type=str, default='',
              help='Configuration of the scanner that is about to run')
@click.option('-O', '--criteria', 'criteria_options', multiple=True, callback=parse_key_value_options,
              help='Overrides a criteria option, e.g. -O minVersion=3.0 or -O regScannerName="Scan.*"')
@click.option('--verbose', default=False, is_flag=True,
              help='Verbose mode')
@click.pass_context
def match_results(ctx,
                  path: Path,
                  output_path: t.Optional[Path],
                  scanner_name: str,
                  scanner_version: str,
                  scanner_configuration: str,
                  criteria_options: t.Dict[str, str],
                  verbose: bool):

    details = ScannerDetails(name=scanner_name,
                             version=scanner_version,
                             configuration=scanner_configuration)

    criteria_cfg = ctx.obj.get('criteria', {}) if ctx.obj else {}

    options = dict(criteria_cfg.get(scanner_name, {}))
    options.update(criteria_options)

    try:
        criteria = criteria_for_scanner(details, {scanner_name: options})
    except CriteriaError as err:
        msg.fail(f'Cannot create criteria for {scanner_name} {scanner_version}.')
        msg.fail(str(err))
        sys.exit(2)

    if verbose:
        msg.info(f"Accepting results of scanners matching '{criteria.name_pattern}' "
                 f"in [{criteria.min_version}, {criteria.max_version})")

    results = load_results_from_file(path)
    reusable = list(filter_results(criteria, results, verbose=verbose))

    if reusable:
        msg.good(f'{len(reusable)} of {len(results)} stored results can be reused.')
    else:
        msg.warn('No reusable results found.')

    output_results(reusable, output_path)


def output_results(results: t.List[ScanResult], path: t.Optional[Path]):
    if path:
        with path.resolve().open('w') as fp:
            dump_results(results, fp)
    else:
        output = StringIO()
        dump_results(results, output)
        output.seek(0)
        print(output.read())
