#!/usr/bin/env python
import codecs
import os.path
import re

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    return codecs.open(os.path.join(here, *parts), 'r').read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


install_requires = [line.strip() for line in read('requirements.txt').splitlines()
                    if line.strip() and not line.startswith('#')]

setup(
    name='pagewatch',
    version=find_version("pagewatch", "__init__.py"),
    description='Web page change detection core, decide if a page changed enough and highlight what changed.',
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
    keywords='website change monitor change detection diff highlight levenshtein',
    entry_points={"console_scripts": ["pagewatch=pagewatch:main"]},
    zip_safe=True,
    packages=find_packages(include=['pagewatch', 'pagewatch.*'], exclude=['pagewatch.tests', 'pagewatch.tests.*']),
    include_package_data=True,
    install_requires=install_requires,
    extras_require={
        'test': ['pytest', 'pytest-mock'],
    },
    license="Apache License 2.0",
    python_requires=">= 3.10",
    classifiers=['Intended Audience :: Developers',
                 'Intended Audience :: System Administrators',
                 'Topic :: Internet',
                 'Topic :: Internet :: WWW/HTTP :: Site Management',
                 'Topic :: Text Processing :: Markup :: HTML',
                 'Topic :: Utilities'
                 ],
)
