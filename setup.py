from setuptools import setup, find_packages

setup(
    name='ts-scan-reuse',
    packages=find_packages(where='src'),
    package_dir={'': 'src'},
    version='1.0.0',
    description='TrustSource scan results reuse matcher',
    author='EACG GmbH',
    license='Apache-2.0',
    url='https://github.com/trustsource/ts-scan-reuse.git',
    download_url='',
    keywords=['scanning', 'scan results', 'reuse', 'compliance', 'TrustSource'],
    classifiers=[],
    python_requires='>=3.8',
    install_requires=[
        'semantic_version',
        'click>=8.1.3',
        'wasabi',
        'toml',
        'dataclasses-json',
        'typing_extensions',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['ts-scan-reuse=ts_scan_reuse.cli:start'],
    },
)
