import os

from setuptools import find_packages, setup

VERSION = '1.0.0'


def parse_md_readme():
    """
    the readme is used as the long description on pypi
    """
    readme = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'README.md')
    if not os.path.exists(readme):
        return ''
    with open(readme) as fh:
        return fh.read()


TEST_REQS = [
    'coverage>=4.2',
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'mavis_config>=1.1.0',
    'pandas>=1.1',
    'snakemake>=7.19.1',
]

DEPLOY_REQS = ['twine', 'wheel']


setup(
    name='rtdetect',
    version='{}'.format(VERSION),
    packages=find_packages('src', exclude=['tests']),
    package_dir={'': 'src'},
    package_data={'rtdetect.schemas': ['*.json']},
    description='Detection of retrotransposed transcripts from structural variant breakends',
    long_description=parse_md_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS + DEPLOY_REQS,
        'deploy': DEPLOY_REQS,
    },
    tests_require=TEST_REQS,
    python_requires='>=3.7',
    test_suite='tests',
    entry_points={'console_scripts': ['rtdetect = rtdetect.main:main']},
)
