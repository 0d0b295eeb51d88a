# SPDX-FileCopyrightText: 2024 EACG GmbH
#
# SPDX-License-Identifier: Apache-2.0

import sys
import click
import typing as t
import toml

from wasabi import Printer
from pathlib import Path

from ..model import ScanResult, load_results

_default_config_location = '~/.ts-scan-reuse/config'

msg = Printer(line_max=240)


def start():
    import ts_scan_reuse.cli.match

    cli()


@click.group(context_settings={'auto_envvar_prefix': 'TS_REUSE'})
@click.version_option(package_name='ts-scan-reuse')
@click.option('--config',
              default=Path(_default_config_location),
              type=click.Path(path_type=Path, dir_okay=False))
@click.option('-p', '--profile', default='default', type=str)
@click.pass_context
def cli(ctx, config: Path, profile: str):
    cfg_path = config.expanduser().resolve(strict=False)

    if not cfg_path.exists():
        _create_default_config(cfg_path)

    cfg_data = toml.load(cfg_path)

    defaults = cfg_data.get(profile)

    if defaults is None:
        msg.fail(f"Profile '{profile}' not found in the config file.")
        sys.exit(1)

    # Per-scanner criteria options live in a nested table, everything else are option defaults
    defaults = dict(defaults)
    criteria_cfg = defaults.pop('criteria', {})

    ctx.obj = {
        'config': cfg_data,
        'config_path': cfg_path,
        'criteria': criteria_cfg
    }

    ctx.default_map = defaults

    for sub in ctx.command.commands.values():
        sub.context_settings['default_map'] = defaults


def _create_default_config(cfg_path: Path):
    cfg = {
        'default': {}
    }

    cfg_path.parent.mkdir(parents=True, exist_ok=True)

    with cfg_path.open('w') as fp:
        cfg_str = toml.dumps(cfg)
        fp.write(cfg_str)


def parse_key_value_options(ctx, param, values: t.Tuple[str, ...]) -> t.Dict[str, str]:
    options = {}

    for val in values:
        key, sep, value = val.partition('=')
        if not sep or not key:
            raise click.BadParameter(f"'{val}' is not in the 'key=value' form.")

        options[key.strip()] = value.strip()

    return options


def load_results_from_file(path: Path) -> t.List[ScanResult]:
    try:
        return load_results(path)
    except Exception as err:
        msg.fail(f"Failed to load scan results from '{path}'. Please ensure the file is valid JSON.")
        msg.fail(str(err))
        sys.exit(2)
