from setuptools import find_packages, setup

VERSION = '0.1.0'


TEST_REQS = [
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'braceexpand>=0.1.2',
    'colour',
    'pandas>=1.1',
    'snakemake>=7.0',
    'svgwrite',
]


setup(
    name='ctgplot',
    version='{}'.format(VERSION),
    packages=find_packages(where='src', exclude=['tests']),
    package_dir={'': 'src'},
    package_data={'ctgplot': ['schemas/*.json']},
    description='Layout and ribbon plots of contig to reference alignments',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.7',
    test_suite='tests',
    entry_points={
        'console_scripts': [
            'ctgplot = ctgplot.main:main',
        ]
    },
)
